"""Session storage for Botter."""

from botter.session.store import SessionStore

__all__ = ["SessionStore"]
