"""Botter - a multi-user conversational bot that learns facts about its users.

Quick start:
    from botter import DialogueEngine, InboundEvent, RuntimeLoop, SessionStore

    runtime = RuntimeLoop(SessionStore(), DialogueEngine())
    messages = runtime.handle(InboundEvent(user_id=42, text="/start"))
"""

from botter.__version__ import __version__
from botter.config import BotterSettings, ConfigLoader, EngineSettings
from botter.core.constants import ConversationState
from botter.core.errors import (
    BotterError,
    ConfigError,
    DeliveryError,
    ValidationError,
)
from botter.core.message_sink import BufferedMessageSink, MessageSink
from botter.core.messages import InboundEvent, OutboundMessage, Reply, UiHint, UiHintKind
from botter.core.types import Session
from botter.dm.engine import DialogueEngine
from botter.runtime.loop import RuntimeLoop
from botter.session.store import SessionStore

__all__ = [
    # Version info
    "__version__",
    # Runtime
    "DialogueEngine",
    "RuntimeLoop",
    "SessionStore",
    # Data model
    "ConversationState",
    "Session",
    "InboundEvent",
    "OutboundMessage",
    "Reply",
    "UiHint",
    "UiHintKind",
    # Delivery
    "MessageSink",
    "BufferedMessageSink",
    # Configuration
    "BotterSettings",
    "ConfigLoader",
    "EngineSettings",
    # Errors
    "BotterError",
    "ConfigError",
    "DeliveryError",
    "ValidationError",
]
