"""Entry points de la CLI (Typer + Rich)."""
