"""CLI for Stratus stacks."""

from stratus.cli.main import cli

__all__ = ["cli"]
