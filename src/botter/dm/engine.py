"""Dialogue engine: the per-user finite-state conversation controller.

Each call to `DialogueEngine.handle` consumes one user message, mutates the
sender's Session in place and returns the replies to send back. Input is
classified in a fixed order: command prefixes, then menu labels, then the
session's current state decides how free text is read.
"""

import logging

from botter.config.settings import EngineSettings
from botter.core.constants import Command, ConversationState, MenuLabel
from botter.core.errors import ValidationError
from botter.core.messages import Reply, UiHint
from botter.core.types import Session
from botter.dm.formatting import (
    facts_to_str,
    known_categories,
    menu_rows,
    normalize,
    normalize_category,
)

logger = logging.getLogger(__name__)

CUSTOM_CATEGORY_PROMPT = (
    'Alright, please send me the category first, for example "Most impressive skill"'
)
EMPTY_CATEGORY_PROMPT = "Please provide a non-empty category name."
START_AGAIN_PROMPT = "Let's start again. Please pick a category."
PICK_OPTION_PROMPT = "Please pick an option or use 'Something else...' to add your own."


class DialogueEngine:
    """State machine driving a single user's conversation.

    The engine holds no per-user data; everything it knows about a user
    lives in the Session passed to `handle`. It performs no I/O and never
    raises for any text input.
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()
        self._categories = frozenset(self.settings.categories)
        self._menu = UiHint.show_menu(menu_rows(self.settings.categories))

    @property
    def menu(self) -> UiHint:
        """Quick-reply menu shown alongside prompts."""
        return self._menu

    def handle(self, session: Session, text: str) -> list[Reply]:
        """Apply one user message to a session.

        Args:
            session: The sender's session, mutated in place
            text: Raw message text

        Returns:
            Replies to deliver, in order
        """
        previous = session.state
        replies = self._dispatch(session, text)
        logger.debug(
            f"Transition {previous.value} -> {session.state.value}",
            extra={"state_from": previous.value, "state_to": session.state.value},
        )
        return replies

    def _dispatch(self, session: Session, text: str) -> list[Reply]:
        if text.startswith(Command.START.value):
            return self._start(session)
        if text.startswith(Command.SHOW_DATA.value):
            return self._show_data(session)

        if text == MenuLabel.DONE.value:
            return self._done(session)
        if text == MenuLabel.SOMETHING_ELSE.value:
            return self._custom_choice(session)
        if text in self._categories:
            return self._select_category(session, text.lower())

        match session.state:
            case ConversationState.AWAITING_CATEGORY_NAME:
                return self._category_name(session, text)
            case ConversationState.AWAITING_VALUE:
                return self._store_pending_value(session, text)
            case ConversationState.CHOOSING:
                return [Reply(text=PICK_OPTION_PROMPT)]
            case _:
                logger.warning(f"Unknown conversation state {session.state!r}, resetting")
                session.reset_pending()
                return [Reply(text=START_AGAIN_PROMPT, ui_hint=self.menu)]

    def _start(self, session: Session) -> list[Reply]:
        reply = f"Hi! My name is {self.settings.bot_name}."
        if session.facts:
            known = ", ".join(known_categories(session.facts))
            reply += (
                f" You already told me your {known}. Why don't you tell me something more "
                "about yourself? Or change anything I already know."
            )
        else:
            reply += (
                " I will hold a more complex conversation with you. "
                "Why don't you tell me something about yourself?"
            )
        session.reset_pending()
        return [Reply(text=reply, ui_hint=self.menu)]

    def _show_data(self, session: Session) -> list[Reply]:
        return [Reply(text=f"This is what you already told me: {facts_to_str(session.facts)}")]

    def _done(self, session: Session) -> list[Reply]:
        session.reset_pending()
        return [
            Reply(
                text=(
                    f"I learned these facts about you: {facts_to_str(session.facts)}"
                    "Until next time!"
                ),
                ui_hint=UiHint.clear_menu(),
            )
        ]

    def _custom_choice(self, session: Session) -> list[Reply]:
        session.pending_category = ""
        session.state = ConversationState.AWAITING_CATEGORY_NAME
        return [Reply(text=CUSTOM_CATEGORY_PROMPT)]

    def _category_name(self, session: Session, text: str) -> list[Reply]:
        try:
            category = normalize_category(text)
        except ValidationError:
            logger.debug("Rejected empty category name")
            return [Reply(text=EMPTY_CATEGORY_PROMPT)]
        return self._select_category(session, category)

    def _select_category(self, session: Session, category: str) -> list[Reply]:
        """Start filling in a category, echoing what is already known about it."""
        session.pending_category = category
        session.state = ConversationState.AWAITING_VALUE

        known = session.known_value(category)
        if known is not None:
            return [
                Reply(text=f"Your {category}? I already know the following about that: {known}")
            ]
        return [Reply(text=f"Your {category}? Yes, I would love to hear about that!")]

    def _store_pending_value(self, session: Session, text: str) -> list[Reply]:
        """Store the message as the value of the pending category."""
        category = session.pending_category
        if not category:
            logger.warning("Awaiting a value without a pending category, resetting")
            session.reset_pending()
            return [Reply(text=START_AGAIN_PROMPT, ui_hint=self.menu)]

        session.facts[category] = normalize(text)
        session.reset_pending()
        return [
            Reply(
                text=(
                    "Neat! Just so you know, this is what you already told me:"
                    f"{facts_to_str(session.facts)}"
                    "You can tell me more, or change your opinion on something."
                ),
                ui_hint=self.menu,
            )
        ]
