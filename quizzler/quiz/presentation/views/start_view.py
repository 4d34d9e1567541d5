import streamlit as st

from quizzler.config import QuizConfig
from quizzler.quiz.presentation.viewmodel import QuizViewModel
from quizzler.quiz.presentation.views import components


def render(vm: QuizViewModel, category_id: str | None):
    st.title(f"🧠 {QuizConfig.APP_TITLE}")
    st.info(f"{vm.question_count} questions. Pick a category and press Start.")

    if st.button("🚀 Start Quiz", type="primary"):
        with st.spinner("Loading questions..."):
            started = vm.start_quiz(category_id)
        if started:
            st.rerun()

    # After the button, so a failed start shows its alert in this same run
    components.render_alerts(vm.alerts)
