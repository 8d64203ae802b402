"""Text helpers for facts and quick-reply menus."""

from collections.abc import Mapping, Sequence

from botter.core.constants import MENU_ROW_WIDTH, MenuLabel
from botter.core.errors import ValidationError


def normalize(text: str) -> str:
    """Trim and lowercase user input before it is stored or used as a key."""
    return text.strip().lower()


def normalize_category(text: str) -> str:
    """Normalize a custom category name.

    Raises:
        ValidationError: If nothing is left after trimming
    """
    category = normalize(text)
    if not category:
        raise ValidationError("Category name must not be empty")
    return category


def known_categories(facts: Mapping[str, str]) -> list[str]:
    """Category names in listing order (sorted)."""
    return sorted(facts)


def facts_to_str(facts: Mapping[str, str]) -> str:
    """Render facts one per line as "<category> - <value>".

    The block is always wrapped in newlines, so an empty mapping renders
    as two consecutive newlines.
    """
    if not facts:
        return "\n\n"
    lines = [f"{category} - {facts[category]}" for category in known_categories(facts)]
    return "\n" + "\n".join(lines) + "\n"


def menu_rows(categories: Sequence[str]) -> list[list[str]]:
    """Lay out the quick-reply menu.

    Categories and "Something else..." fill rows of two; "Done" sits alone
    on the last row.
    """
    labels = [*categories, MenuLabel.SOMETHING_ELSE.value]
    rows = [labels[i : i + MENU_ROW_WIDTH] for i in range(0, len(labels), MENU_ROW_WIDTH)]
    rows.append([MenuLabel.DONE.value])
    return rows
