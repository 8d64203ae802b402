"""Runtime module for Botter."""

from botter.runtime.loop import RuntimeLoop

__all__ = ["RuntimeLoop"]
