"""Dialogue management for Botter."""

from botter.dm.engine import DialogueEngine
from botter.dm.formatting import facts_to_str, menu_rows

__all__ = ["DialogueEngine", "facts_to_str", "menu_rows"]
