"""Command-line interface for inputmask."""

from .main import cli

__all__ = ["cli"]
