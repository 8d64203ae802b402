"""Observability module for Botter."""

from botter.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
