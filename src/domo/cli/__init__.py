"""Command line interface for domo."""

from .main import cli

__all__ = ["cli"]
