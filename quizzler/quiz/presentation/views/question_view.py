import streamlit as st

from quizzler.quiz.presentation.text import escape_html, escape_markdown
from quizzler.quiz.presentation.viewmodel import QuizViewModel
from quizzler.quiz.presentation.views import components


def _render_question(vm: QuizViewModel) -> None:
    if vm.question_category:
        st.caption(escape_markdown(vm.question_category))
    # Decoded provider text must never become markup
    st.markdown(
        f'<div class="question-text">{escape_html(vm.question_text)}</div>',
        unsafe_allow_html=True,
    )


def render_active(vm: QuizViewModel):
    _render_question(vm)

    index = vm.engine.current_index
    for i, (choice, label) in enumerate(vm.choice_labels):
        # Keys are positional: duplicate answer text must still get its own button
        if st.button(escape_markdown(label), key=f"choice_{index}_{i}", use_container_width=True):
            vm.select_answer(choice)
            st.rerun()


def render_feedback(vm: QuizViewModel):
    _render_question(vm)

    outcome = vm.last_outcome
    index = vm.engine.current_index
    for i, (choice, label) in enumerate(vm.choice_labels):
        marker = ""
        if outcome and choice == outcome.correct_answer:
            marker = "✅ "
        elif outcome and choice == outcome.choice:
            marker = "❌ "
        st.button(
            f"{marker}{escape_markdown(label)}",
            key=f"answered_{index}_{i}",
            disabled=True,
            use_container_width=True,
        )

    components.render_alerts(vm.alerts)

    if st.button("Next ➡️", type="primary", use_container_width=True):
        vm.next_step()
        st.rerun()
