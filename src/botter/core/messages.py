"""Message contract between the dialogue engine and its transport.

Inbound events carry a user's text; outbound messages carry the bot's reply
plus an optional quick-reply hint the delivery surface may render.
"""

from enum import Enum
from typing import Self

from pydantic import BaseModel, Field, model_validator

UserId = str | int


class UiHintKind(str, Enum):
    """What the delivery surface should do with quick replies."""

    NONE = "none"
    SHOW_MENU = "show_menu"
    CLEAR_MENU = "clear_menu"


class UiHint(BaseModel):
    """Quick-reply affordance attached to an outbound message."""

    kind: UiHintKind = UiHintKind.NONE
    rows: list[list[str]] = Field(default_factory=list, description="Labels grouped in rows")
    one_time: bool = Field(default=True, description="Hide the menu once a label is used")

    @property
    def labels(self) -> list[str]:
        """All labels in display order."""
        return [label for row in self.rows for label in row]

    @classmethod
    def none(cls) -> "UiHint":
        return cls()

    @classmethod
    def show_menu(cls, rows: list[list[str]]) -> "UiHint":
        return cls(kind=UiHintKind.SHOW_MENU, rows=[list(row) for row in rows])

    @classmethod
    def clear_menu(cls) -> "UiHint":
        return cls(kind=UiHintKind.CLEAR_MENU)


class Reply(BaseModel):
    """A reply produced by the dialogue engine, not yet addressed."""

    text: str
    ui_hint: UiHint = Field(default_factory=UiHint.none)

    def to(self, chat_target: UserId) -> "OutboundMessage":
        """Address this reply to a chat."""
        return OutboundMessage(chat_target=chat_target, text=self.text, ui_hint=self.ui_hint)


class OutboundMessage(BaseModel):
    """A reply addressed to a chat, ready for delivery."""

    chat_target: UserId
    text: str
    ui_hint: UiHint = Field(default_factory=UiHint.none)


class InboundEvent(BaseModel):
    """A text message sent by a user.

    Transports that cannot tell senders apart may supply only `chat_id`;
    the chat then doubles as the session key.
    """

    user_id: UserId | None = None
    chat_id: UserId | None = None
    text: str = ""

    @model_validator(mode="after")
    def _require_identity(self) -> Self:
        if self.user_id is None and self.chat_id is None:
            raise ValueError("Either user_id or chat_id must be provided")
        return self

    @property
    def session_key(self) -> UserId:
        """Identifier the session store is keyed by."""
        if self.user_id is not None:
            return self.user_id
        return self.chat_id  # type: ignore[return-value]

    @property
    def chat_target(self) -> UserId:
        """Where replies to this event are delivered."""
        if self.chat_id is not None:
            return self.chat_id
        return self.user_id  # type: ignore[return-value]
