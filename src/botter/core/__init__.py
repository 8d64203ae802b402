"""Core types, constants and errors for Botter."""

from botter.core.constants import Command, ConversationState, MenuLabel
from botter.core.errors import (
    BotterError,
    ConfigError,
    DeliveryError,
    ValidationError,
)
from botter.core.message_sink import BufferedMessageSink, MessageSink
from botter.core.messages import InboundEvent, OutboundMessage, Reply, UiHint, UiHintKind
from botter.core.types import Session

__all__ = [
    "BotterError",
    "BufferedMessageSink",
    "Command",
    "ConfigError",
    "ConversationState",
    "DeliveryError",
    "InboundEvent",
    "MenuLabel",
    "MessageSink",
    "OutboundMessage",
    "Reply",
    "Session",
    "UiHint",
    "UiHintKind",
    "ValidationError",
]
