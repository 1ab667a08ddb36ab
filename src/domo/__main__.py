"""Main entry point for domo."""

from domo.cli import cli

if __name__ == "__main__":
    cli()
