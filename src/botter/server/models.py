"""API Models - Pydantic models for FastAPI endpoints.

Defines request and response schemas for the Botter REST API.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from botter.core.constants import ConversationState
from botter.core.messages import OutboundMessage


class MessageRequest(BaseModel):
    """Request model for a user message."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: str = Field(min_length=1, description="Stable identifier of the sender")
    chat_id: str | None = Field(default=None, description="Chat to reply to, defaults to user_id")
    text: str = Field(default="", description="Message text; empty text is ignored")


class MessageResponse(BaseModel):
    """Replies produced for a message."""

    messages: list[OutboundMessage] = Field(default_factory=list)


class SessionResponse(BaseModel):
    """Read-only view of a user's session."""

    user_id: str
    state: ConversationState
    facts: dict[str, str]
    pending_category: str | None


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "starting"]
    version: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    sessions: int = 0


class ReadinessResponse(BaseModel):
    """Readiness probe response."""

    ready: bool
    message: str
