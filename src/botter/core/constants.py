"""Core constants and enums."""

from enum import Enum


class ConversationState(str, Enum):
    """State of a user's conversation."""

    CHOOSING = "choosing"
    AWAITING_VALUE = "awaiting_value"
    AWAITING_CATEGORY_NAME = "awaiting_category_name"


class Command(str, Enum):
    """Commands recognised by prefix."""

    START = "/start"
    SHOW_DATA = "/show_data"


class MenuLabel(str, Enum):
    """Quick-reply labels that are not fact categories."""

    SOMETHING_ELSE = "Something else..."
    DONE = "Done"


DEFAULT_BOT_NAME = "Doctor Botter"
DEFAULT_CATEGORIES = ("Age", "Favourite colour", "Number of siblings")

# Labels per quick-reply row
MENU_ROW_WIDTH = 2
