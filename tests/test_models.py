"""Tests for the domain models."""

import pydantic
import pytest

from core.domain.models import Invocation, LogLevel, LogRecord, Profile, ProfileSelection


def test_invocation_argc_counts_program():
    assert Invocation.from_args("sys.azenith-service", []).argc == 1
    assert Invocation.from_args("sys.azenith-service", ["--profile", "2"]).argc == 3


def test_invocation_is_immutable():
    invocation = Invocation.from_args("p", ["--run"])
    with pytest.raises(pydantic.ValidationError):
        invocation.args = ("--log",)


@pytest.mark.parametrize("token, profile", [("1", Profile.PERFORMANCE), ("2", Profile.BALANCED), ("3", Profile.ECO_MODE)])
def test_profile_from_token(token, profile):
    assert Profile.from_token(token) is profile


def test_profile_from_token_is_exact():
    assert Profile.from_token("02") is None
    assert Profile.from_token("2 ") is None


def test_profile_selection_texts():
    selection = ProfileSelection(profile=Profile.PERFORMANCE)
    assert selection.log_message == "Applying Performance Profile via execute"
    assert selection.toast_message == "Applying Performance Profile"
    assert selection.confirmation == "Applying Performance Profile"


def test_legends():
    assert Profile.legend() == ["1 = Performance", "2 = Balanced", "3 = Eco Mode"]
    assert LogLevel.legend() == "Levels: 0=DEBUG, 1=INFO, 2=WARN, 3=ERROR, 4=FATAL"


def test_log_record_requires_tag():
    with pytest.raises(pydantic.ValidationError):
        LogRecord(tag="", level=LogLevel.INFO, message="x")


def test_log_record_rejects_unknown_level():
    with pytest.raises(pydantic.ValidationError):
        LogRecord(tag="T", level=7, message="x")
