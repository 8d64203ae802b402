"""Shared fixtures for Botter tests.

Everything runs in memory: a fresh SessionStore per test and a
BufferedMessageSink standing in for a real transport.
"""

import pytest

from botter.core.message_sink import BufferedMessageSink
from botter.core.types import Session
from botter.dm.engine import DialogueEngine
from botter.runtime.loop import RuntimeLoop
from botter.session.store import SessionStore


@pytest.fixture
def session() -> Session:
    """A brand new session in the CHOOSING state."""
    return Session()


@pytest.fixture
def engine() -> DialogueEngine:
    """Engine with default settings."""
    return DialogueEngine()


@pytest.fixture
def store() -> SessionStore:
    """Empty session store."""
    return SessionStore()


@pytest.fixture
def sink() -> BufferedMessageSink:
    """Sink recording every delivered message."""
    return BufferedMessageSink()


@pytest.fixture
def runtime(store: SessionStore, engine: DialogueEngine, sink: BufferedMessageSink) -> RuntimeLoop:
    """Runtime wired to the in-memory store and buffered sink."""
    return RuntimeLoop(store=store, engine=engine, sink=sink)
