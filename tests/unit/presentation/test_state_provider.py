import streamlit as st

from quizzler.quiz.presentation.state_provider import (
    InMemoryStateProvider,
    StreamlitStateProvider,
)


def test_streamlit_provider_reads_and_writes_session_state():
    provider = StreamlitStateProvider()

    provider.set("engine", "value")

    assert st.session_state["engine"] == "value"
    assert provider.get("engine") == "value"
    assert provider.get("missing", 42) == 42


def test_streamlit_provider_clear():
    provider = StreamlitStateProvider()
    provider.set("a", 1)

    provider.clear()

    assert provider.get("a") is None


def test_in_memory_provider_round_trip():
    provider = InMemoryStateProvider()
    provider.set("k", [1])

    assert provider.get("k") == [1]
    provider.clear()
    assert provider.get("k", "default") == "default"
