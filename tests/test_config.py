"""Tests for AppSettings."""

import pydantic
import pytest

from core.config import AppSettings, get_user_config_dir


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.program_name == "sys.azenith-service"
    assert settings.ai_mode_property == "persist.sys.azenithconf.AIenabled"
    assert settings.max_message_bytes == 1023
    assert settings.strict_log_level is True
    assert settings.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AZENITH_STRICT_LOG_LEVEL", "false")
    monkeypatch.setenv("AZENITH_MAX_MESSAGE_BYTES", "64")

    settings = AppSettings(_env_file=None)

    assert settings.strict_log_level is False
    assert settings.max_message_bytes == 64


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("AZENITH_PROFILE_LOG_TAG=Zenith\n", encoding="utf-8")

    assert AppSettings(_env_file=env_file).profile_log_tag == "Zenith"


@pytest.mark.parametrize("field, value", [("max_message_bytes", 0), ("command_timeout_seconds", 0)])
def test_invalid_values(field, value):
    with pytest.raises(pydantic.ValidationError):
        AppSettings(_env_file=None, **{field: value})


def test_config_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("AZENITH_CONFIG_DIR", str(tmp_path))
    assert get_user_config_dir() == tmp_path


def test_config_dir_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("AZENITH_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "azenith"
