import streamlit as st

from quizzler.config import Rank
from quizzler.quiz.presentation.viewmodel import QuizViewModel
from quizzler.quiz.presentation.views import components


def render(vm: QuizViewModel):
    summary = vm.summary
    if summary is None:
        st.warning("No results to show.")
        return

    if summary.rank == Rank.ULTIMATE.label:
        st.balloons()

    st.title("🏁 Results")

    col1, col2, col3 = st.columns(3)
    col1.metric("Score", f"{summary.score} / {summary.total}")

    percent = summary.score / summary.total * 100
    col2.metric("Accuracy", f"{int(percent)}%")
    col3.metric("Rank", summary.rank)

    components.render_alerts(vm.alerts)

    st.markdown("---")
    if st.button("🔄 Play Again", type="primary", use_container_width=True):
        vm.reset()
        st.rerun()
