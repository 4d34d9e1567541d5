from unittest.mock import Mock

import pytest
import streamlit as st

from quizzler.quiz.domain.models import Category, FetchResult, Question
from quizzler.quiz.domain.ports import ITriviaGateway


class MockSessionState(dict):
    """
    Mock for st.session_state that behaves like both a dict and an object.
    Allows both dict-style and attribute-style access.
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err


@pytest.fixture(autouse=True)
def mock_streamlit_session():
    """
    Auto-use fixture that ensures st.session_state exists for all tests.
    """
    original_session_state = getattr(st, "session_state", None)

    st.session_state = MockSessionState()

    yield st.session_state

    st.session_state.clear()

    if original_session_state is not None:
        st.session_state = original_session_state


def create_question(n, correct="Right", incorrect=("Wrong 1", "Wrong 2", "Wrong 3")):
    """Helper to create a minimal valid Question object."""
    return Question(
        text=f"Question {n}?",
        correct_answer=f"{correct} {n}",
        incorrect_answers=tuple(f"{w} {n}" for w in incorrect),
        category="General Knowledge",
        difficulty="easy",
        type="multiple",
    )


@pytest.fixture
def sample_question():
    return Question(
        text="What does &quot;HTML&quot; stand for?",
        correct_answer="Hypertext Markup Language",
        incorrect_answers=("Hyperlink Text Mode", "Home Tool Markup Language", "High Text Machine Language"),
        category="Science: Computers",
    )


@pytest.fixture
def sample_questions():
    return [create_question(i) for i in range(1, 4)]


@pytest.fixture
def mock_gateway(sample_questions):
    """Gateway that succeeds with two categories and three questions."""
    gateway = Mock(spec=ITriviaGateway)
    gateway.fetch_categories.return_value = FetchResult.success(
        [Category(id="9", name="General Knowledge"), Category(id="18", name="Science: Computers")]
    )
    gateway.fetch_questions.return_value = FetchResult.success(sample_questions)
    return gateway
