"""Command line entry points for treelist."""

from .main import app

__all__ = ["app"]
