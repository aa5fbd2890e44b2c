"""Typer command-line interface for stamp."""

from .main import cli

__all__ = ["cli"]
