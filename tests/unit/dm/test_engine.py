"""Tests for DialogueEngine transitions."""

from enum import Enum

import pytest

from botter.config.settings import EngineSettings
from botter.core.constants import ConversationState
from botter.core.messages import UiHintKind
from botter.core.types import Session
from botter.dm.engine import (
    CUSTOM_CATEGORY_PROMPT,
    EMPTY_CATEGORY_PROMPT,
    PICK_OPTION_PROMPT,
    START_AGAIN_PROMPT,
    DialogueEngine,
)


class StrayState(str, Enum):
    """A state value the engine does not know."""

    LOST = "lost"


DEFAULT_MENU = [
    ["Age", "Favourite colour"],
    ["Number of siblings", "Something else..."],
    ["Done"],
]


def awaiting(category: str, **facts: str) -> Session:
    """Session waiting for the value of `category`."""
    return Session(
        state=ConversationState.AWAITING_VALUE,
        facts=dict(facts),
        pending_category=category,
    )


class TestStart:
    """Tests for the /start command."""

    def test_greets_new_user(self, engine: DialogueEngine, session: Session):
        # Act
        replies = engine.handle(session, "/start")

        # Assert
        assert len(replies) == 1
        assert replies[0].text.startswith("Hi! My name is Doctor Botter.")
        assert "You already told me" not in replies[0].text
        assert session.state == ConversationState.CHOOSING

    def test_shows_menu(self, engine: DialogueEngine, session: Session):
        replies = engine.handle(session, "/start")

        assert replies[0].ui_hint.kind == UiHintKind.SHOW_MENU
        assert replies[0].ui_hint.rows == DEFAULT_MENU
        assert replies[0].ui_hint.one_time is True

    def test_lists_known_categories_sorted(self, engine: DialogueEngine):
        session = Session(facts={"favourite colour": "blue", "age": "25"})

        replies = engine.handle(session, "/start")

        assert "You already told me your age, favourite colour." in replies[0].text

    def test_resets_pending_category(self, engine: DialogueEngine):
        session = awaiting("age")

        engine.handle(session, "/start")

        assert session.state == ConversationState.CHOOSING
        assert session.pending_category == ""

    def test_matches_by_prefix(self, engine: DialogueEngine):
        session = awaiting("age")

        replies = engine.handle(session, "/start now please")

        assert replies[0].text.startswith("Hi!")
        assert session.state == ConversationState.CHOOSING

    def test_uses_configured_bot_name(self, session: Session):
        engine = DialogueEngine(EngineSettings(bot_name="Nurse Botty"))

        replies = engine.handle(session, "/start")

        assert replies[0].text.startswith("Hi! My name is Nurse Botty.")


class TestShowData:
    """Tests for the /show_data command."""

    def test_empty_facts(self, engine: DialogueEngine, session: Session):
        replies = engine.handle(session, "/show_data")

        assert replies[0].text == "This is what you already told me: \n\n"
        assert replies[0].ui_hint.kind == UiHintKind.NONE

    def test_dumps_facts(self, engine: DialogueEngine):
        session = Session(facts={"age": "25"})

        replies = engine.handle(session, "/show_data")

        assert replies[0].text == "This is what you already told me: \nage - 25\n"

    def test_leaves_state_untouched(self, engine: DialogueEngine):
        session = awaiting("age")

        engine.handle(session, "/show_data extra args")

        assert session.state == ConversationState.AWAITING_VALUE
        assert session.pending_category == "age"


class TestDone:
    """Tests for the Done label."""

    def test_keeps_facts_and_clears_menu(self, engine: DialogueEngine):
        # Arrange
        session = awaiting("favourite colour", age="25")

        # Act
        replies = engine.handle(session, "Done")

        # Assert
        assert session.state == ConversationState.CHOOSING
        assert session.pending_category == ""
        assert session.facts == {"age": "25"}
        assert replies[0].text == "I learned these facts about you: \nage - 25\nUntil next time!"
        assert replies[0].ui_hint.kind == UiHintKind.CLEAR_MENU

    def test_with_no_facts(self, engine: DialogueEngine, session: Session):
        replies = engine.handle(session, "Done")

        assert replies[0].text == "I learned these facts about you: \n\nUntil next time!"

    def test_is_case_sensitive(self, engine: DialogueEngine):
        session = awaiting("age")

        engine.handle(session, "done")

        assert session.facts == {"age": "done"}


class TestSomethingElse:
    """Tests for the custom category path."""

    def test_asks_for_category(self, engine: DialogueEngine, session: Session):
        replies = engine.handle(session, "Something else...")

        assert session.state == ConversationState.AWAITING_CATEGORY_NAME
        assert replies[0].text == CUSTOM_CATEGORY_PROMPT

    def test_drops_pending_category(self, engine: DialogueEngine):
        session = awaiting("age")

        engine.handle(session, "Something else...")

        assert session.state == ConversationState.AWAITING_CATEGORY_NAME
        assert session.pending_category == ""

    def test_category_name_is_normalized(self, engine: DialogueEngine):
        session = Session(state=ConversationState.AWAITING_CATEGORY_NAME)

        replies = engine.handle(session, "  Most impressive skill ")

        assert session.state == ConversationState.AWAITING_VALUE
        assert session.pending_category == "most impressive skill"
        assert replies[0].text == (
            "Your most impressive skill? Yes, I would love to hear about that!"
        )

    def test_existing_custom_category_is_echoed(self, engine: DialogueEngine):
        session = Session(
            state=ConversationState.AWAITING_CATEGORY_NAME,
            facts={"pets": "a cat"},
        )

        replies = engine.handle(session, "Pets")

        assert replies[0].text == "Your pets? I already know the following about that: a cat"

    @pytest.mark.parametrize("text", ["   ", "\t"])
    def test_blank_category_reprompts(self, engine: DialogueEngine, text: str):
        session = Session(state=ConversationState.AWAITING_CATEGORY_NAME)

        replies = engine.handle(session, text)

        assert replies[0].text == EMPTY_CATEGORY_PROMPT
        assert session.state == ConversationState.AWAITING_CATEGORY_NAME
        assert session.pending_category == ""

    def test_menu_label_wins_over_category_name(self, engine: DialogueEngine):
        session = Session(state=ConversationState.AWAITING_CATEGORY_NAME)

        engine.handle(session, "Age")

        assert session.pending_category == "age"


class TestRegularChoice:
    """Tests for selecting a fixed category."""

    @pytest.mark.parametrize(
        "label,category",
        [
            ("Age", "age"),
            ("Favourite colour", "favourite colour"),
            ("Number of siblings", "number of siblings"),
        ],
    )
    def test_selects_category(
        self, engine: DialogueEngine, session: Session, label: str, category: str
    ):
        replies = engine.handle(session, label)

        assert session.state == ConversationState.AWAITING_VALUE
        assert session.pending_category == category
        assert replies[0].text == f"Your {category}? Yes, I would love to hear about that!"
        assert replies[0].ui_hint.kind == UiHintKind.NONE

    def test_selecting_twice_is_idempotent(self, engine: DialogueEngine):
        # Arrange
        session = Session(facts={"age": "25"})

        # Act
        first = engine.handle(session, "Age")
        second = engine.handle(session, "Age")

        # Assert
        assert session.state == ConversationState.AWAITING_VALUE
        assert session.pending_category == "age"
        assert first == second
        assert "25" in second[0].text

    def test_configured_categories(self, session: Session):
        engine = DialogueEngine(EngineSettings(categories=["Pets", "Hometown"]))

        replies = engine.handle(session, "Hometown")

        assert session.pending_category == "hometown"
        assert replies[0].text.startswith("Your hometown?")

    def test_padded_configured_label_gives_trimmed_key(self, session: Session):
        # Arrange
        engine = DialogueEngine(EngineSettings(categories=[" Pets ", "Hometown"]))

        # Act
        engine.handle(session, "Pets")
        engine.handle(session, "a cat")

        # Assert
        assert session.facts == {"pets": "a cat"}
        assert engine.menu.rows[0] == ["Pets", "Hometown"]

    def test_unknown_label_is_free_text(self, session: Session):
        engine = DialogueEngine(EngineSettings(categories=["Pets"]))

        replies = engine.handle(session, "Age")

        assert replies[0].text == PICK_OPTION_PROMPT
        assert session.state == ConversationState.CHOOSING


class TestReceivedValue:
    """Tests for storing a value."""

    def test_stores_normalized_value(self, engine: DialogueEngine):
        session = awaiting("most impressive skill")

        engine.handle(session, "Golang")

        assert session.facts["most impressive skill"] == "golang"
        assert session.state == ConversationState.CHOOSING
        assert session.pending_category == ""

    def test_trims_value(self, engine: DialogueEngine):
        session = awaiting("age")

        engine.handle(session, "  Twenty Five ")

        assert session.facts["age"] == "twenty five"

    def test_confirms_with_facts_and_menu(self, engine: DialogueEngine):
        session = awaiting("age")

        replies = engine.handle(session, "25")

        assert replies[0].text == (
            "Neat! Just so you know, this is what you already told me:"
            "\nage - 25\n"
            "You can tell me more, or change your opinion on something."
        )
        assert replies[0].ui_hint.rows == DEFAULT_MENU

    def test_overwrites_existing_value(self, engine: DialogueEngine):
        session = awaiting("age", age="25")

        engine.handle(session, "26")

        assert session.facts == {"age": "26"}

    def test_missing_pending_category_starts_again(self, engine: DialogueEngine):
        session = Session(state=ConversationState.AWAITING_VALUE)

        replies = engine.handle(session, "25")

        assert replies[0].text == START_AGAIN_PROMPT
        assert replies[0].ui_hint.kind == UiHintKind.SHOW_MENU
        assert session.state == ConversationState.CHOOSING
        assert session.facts == {}


class TestChoosingFallback:
    """Tests for free text while choosing."""

    def test_nudges_without_menu(self, engine: DialogueEngine, session: Session):
        replies = engine.handle(session, "hello there")

        assert replies[0].text == PICK_OPTION_PROMPT
        assert replies[0].ui_hint.kind == UiHintKind.NONE
        assert session.state == ConversationState.CHOOSING
        assert session.facts == {}

    def test_unknown_state_starts_again(self, engine: DialogueEngine):
        # Arrange
        session = Session(facts={"age": "25"}, pending_category="age")
        session.state = StrayState.LOST

        # Act
        replies = engine.handle(session, "hello there")

        # Assert
        assert replies[0].text == START_AGAIN_PROMPT
        assert replies[0].ui_hint.kind == UiHintKind.SHOW_MENU
        assert session.state == ConversationState.CHOOSING
        assert session.pending_category == ""
        assert session.facts == {"age": "25"}


@pytest.mark.parametrize("state", list(ConversationState))
@pytest.mark.parametrize(
    "text",
    ["/start", "/show_data", "Done", "Something else...", "Age", "free text", "   "],
)
def test_every_input_gets_a_reply(engine: DialogueEngine, state: ConversationState, text: str):
    """No (state, input) combination is silently dropped."""
    pending = "age" if state == ConversationState.AWAITING_VALUE else ""
    session = Session(state=state, pending_category=pending)

    replies = engine.handle(session, text)

    assert len(replies) == 1
    assert replies[0].text
    # pending category is set exactly while awaiting a value
    assert bool(session.pending_category) == (session.state == ConversationState.AWAITING_VALUE)
