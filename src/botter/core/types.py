"""Session data model."""

import copy
from dataclasses import dataclass, field

from botter.core.constants import ConversationState


@dataclass
class Session:
    """Mutable conversation state of a single user.

    `pending_category` is non-empty exactly while the session is in
    AWAITING_VALUE. Fact keys and values are stored trimmed and lowercase.
    """

    state: ConversationState = ConversationState.CHOOSING
    facts: dict[str, str] = field(default_factory=dict)
    pending_category: str = ""

    def known_value(self, category: str) -> str | None:
        """Return the stored value for a category, or None if nothing useful is stored."""
        value = self.facts.get(category)
        return value or None

    def reset_pending(self) -> None:
        """Forget the category being filled in and go back to choosing."""
        self.pending_category = ""
        self.state = ConversationState.CHOOSING

    def snapshot(self) -> "Session":
        """Return a detached copy for read-only reporting."""
        return copy.deepcopy(self)
