"""CLI commands for domo."""

from .config import config
from .demo import demo
from .samples import samples

__all__ = ["config", "demo", "samples"]
