"""Contributions report package: aggregation, rendering and the run entry point."""

from .runner import main

__all__ = ["main"]
