import streamlit as st

from quizzler.quiz.domain.models import Category
from quizzler.quiz.presentation.text import escape_markdown
from quizzler.quiz.presentation.viewmodel import Alert, AlertLevel
from quizzler.shared.telemetry import Telemetry

ANY_CATEGORY_LABEL = "Any Category"


def apply_styles():
    st.markdown("""
        <style>
            .block-container { padding-top: 2rem !important; }
            .stat-box { padding: 10px; background-color: #f0f2f6; border-radius: 5px; text-align: center; font-weight: bold; }
            .question-text { font-size: 1.2rem; font-weight: 600; margin-bottom: 1rem; }
        </style>
    """, unsafe_allow_html=True)


def render_sidebar(categories: list[Category], current_category: str | None, locked: bool) -> str | None:
    """Returns the selected category id (None = provider mix)."""
    st.sidebar.header("⚙️ Settings")

    names = {c.id: c.name for c in categories}
    options: list[str | None] = [None, *names.keys()]
    index = options.index(current_category) if current_category in options else 0

    category_id = st.sidebar.selectbox(
        "Category",
        options,
        index=index,
        format_func=lambda cid: ANY_CATEGORY_LABEL if cid is None else names[cid],
        disabled=locked,
    )

    with st.sidebar.expander("🕵️‍♂️ Telemetry"):
        st.caption("Trace ID: " + Telemetry.get_trace_id())

    return category_id


def render_score(score: int, current: int, total: int):
    col1, col2 = st.columns(2)
    col1.markdown(f'<div class="stat-box">🏆 Score: {score}</div>', unsafe_allow_html=True)
    col2.markdown(f'<div class="stat-box">❓ {current} / {total}</div>', unsafe_allow_html=True)
    st.progress(current / total if total else 0.0)


def render_alerts(alerts: list[Alert]):
    for alert in alerts:
        text = alert.message
        if alert.emphasis:
            text = f"{text} **{escape_markdown(alert.emphasis)}**"

        if alert.level == AlertLevel.SUCCESS:
            st.success(text)
        elif alert.level == AlertLevel.DANGER:
            st.error(text)
        elif alert.level == AlertLevel.WARNING:
            st.warning(text)
        else:
            st.info(text)
