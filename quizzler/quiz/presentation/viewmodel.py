from enum import Enum
from typing import Callable

from pydantic import BaseModel

from quizzler.config import QuizConfig
from quizzler.fsm import QuizState
from quizzler.quiz.application.engine import QuizSessionEngine
from quizzler.quiz.domain.errors import FetchErrorKind
from quizzler.quiz.domain.models import AnswerOutcome, Category, Completed
from quizzler.quiz.domain.ports import ITriviaGateway
from quizzler.quiz.presentation.state_provider import IStateProvider
from quizzler.quiz.presentation.text import decode_html
from quizzler.shared.telemetry import Telemetry


class AlertLevel(str, Enum):
    SUCCESS = "success"
    DANGER = "danger"
    DARK = "dark"
    WARNING = "warning"


class Alert(BaseModel):
    level: AlertLevel
    message: str
    emphasis: str | None = None  # Rendered in bold after the message


FETCH_FAILURE_MESSAGES: dict[FetchErrorKind, str] = {
    FetchErrorKind.NETWORK_FAILURE: "Unable to fetch questions. Check your connection and press Start again.",
    FetchErrorKind.BAD_STATUS: "Unable to fetch questions right now. Wait a moment and press Start again.",
    FetchErrorKind.MALFORMED_PAYLOAD: "Unable to fetch questions: the trivia service sent an unexpected response.",
    FetchErrorKind.NO_QUESTIONS_AVAILABLE: "No questions available for this category. Try another one.",
}


def session_gateway(
    state_provider: IStateProvider, factory: Callable[[], ITriviaGateway]
) -> ITriviaGateway:
    """
    Returns the gateway owned by this user session, building it on first use.
    Each session keeps its own HTTP connection pool; requests.Session is not
    safe to share between the threads Streamlit runs sessions on.
    """
    gateway = state_provider.get("gateway")
    if gateway is None:
        gateway = factory()
        state_provider.set("gateway", gateway)
    return gateway


class QuizViewModel:
    """
    Presentation Adapter: turns user intents into gateway/engine calls and
    engine state into display-ready values. All state lives in the
    state provider so it survives Streamlit reruns.
    """

    def __init__(
        self,
        gateway: ITriviaGateway,
        state_provider: IStateProvider,
        question_count: int = QuizConfig.QUESTION_COUNT,
    ):
        self.gateway = gateway
        self.state = state_provider
        self.question_count = question_count
        self.telemetry = Telemetry("ViewModel")

        if self.state.get("engine") is None:
            self.state.set("engine", QuizSessionEngine())
        if self.state.get("alerts") is None:
            self.state.set("alerts", [])

    # --- Properties ---
    @property
    def engine(self) -> QuizSessionEngine:
        return self.state.get("engine")

    @property
    def current_state(self) -> QuizState:
        return self.engine.state

    @property
    def categories(self) -> list[Category]:
        return self.state.get("categories") or []

    @property
    def selected_category(self) -> str | None:
        return self.state.get("selected_category")

    @property
    def alerts(self) -> list[Alert]:
        return self.state.get("alerts", [])

    @property
    def score(self) -> int:
        return self.engine.score

    @property
    def progress(self) -> tuple[int, int]:
        """(question number, total) for the header, 1-based."""
        total = self.engine.total_questions
        return min(self.engine.current_index + 1, total), total

    @property
    def question_text(self) -> str:
        return decode_html(self.engine.current_question().text)

    @property
    def question_category(self) -> str | None:
        category = self.engine.current_question().category
        return decode_html(category) if category else None

    @property
    def choice_labels(self) -> list[tuple[str, str]]:
        """(raw choice, display label) pairs; the raw value goes back to the engine."""
        return [(choice, decode_html(choice)) for choice in self.engine.current_choices()]

    @property
    def last_outcome(self) -> AnswerOutcome | None:
        return self.state.get("last_outcome")

    @property
    def summary(self) -> Completed | None:
        return self.state.get("summary")

    # --- Actions (Traced) ---
    def load_categories(self, force: bool = False) -> None:
        if self.state.get("categories") is not None and not force:
            return

        Telemetry.start_trace()
        result = self.gateway.fetch_categories()
        if result.ok:
            self.state.set("categories", result.value)
            return

        # Keep an empty list so we do not refetch on every rerun
        self.state.set("categories", [])
        self._set_alerts(
            Alert(
                level=AlertLevel.WARNING,
                message="Unable to load categories. You can still play with Any Category.",
            )
        )

    def start_quiz(self, category_id: str | None) -> bool:
        Telemetry.start_trace()
        self.telemetry.log_info("Action: Start Quiz", category_id=category_id)

        result = self.gateway.fetch_questions(category_id, self.question_count)
        if not result.ok or not result.value:
            kind = result.error.kind if result.error else FetchErrorKind.NO_QUESTIONS_AVAILABLE
            self._set_alerts(
                Alert(level=AlertLevel.WARNING, message=FETCH_FAILURE_MESSAGES[kind])
            )
            return False

        self.engine.start_session(result.value)
        self.state.set("selected_category", category_id)
        self.state.set("last_outcome", None)
        self.state.set("summary", None)
        self._set_alerts()
        return True

    def select_answer(self, choice: str) -> AnswerOutcome | None:
        Telemetry.start_trace()
        if self.current_state != QuizState.AWAITING_ANSWER:
            # Stale widget event from a previous rerun
            self.telemetry.log_warning(
                "Ignored answer outside question", state=self.current_state.name
            )
            return None

        outcome = self.engine.submit_answer(choice)
        self.state.set("last_outcome", outcome)

        if outcome.is_correct:
            self._set_alerts(Alert(level=AlertLevel.SUCCESS, message="Correct!"))
        else:
            self._set_alerts(
                Alert(
                    level=AlertLevel.DANGER,
                    message="Incorrect; the correct answer is",
                    emphasis=decode_html(outcome.correct_answer),
                )
            )
        return outcome

    def next_step(self) -> None:
        Telemetry.start_trace()
        if self.current_state != QuizState.ANSWERED:
            self.telemetry.log_warning(
                "Ignored advance before answer", state=self.current_state.name
            )
            return

        outcome = self.engine.advance()
        self.state.set("last_outcome", None)

        if isinstance(outcome, Completed):
            self.state.set("summary", outcome)
            self._set_alerts(
                Alert(
                    level=AlertLevel.DARK,
                    message=f"Quiz Completed! Your Score: {outcome.score}/{outcome.total}. Rank:",
                    emphasis=outcome.rank,
                )
            )
        else:
            self._set_alerts()

    def reset(self) -> None:
        Telemetry.start_trace()
        self.engine.reset()
        self.state.set("selected_category", None)
        self.state.set("last_outcome", None)
        self.state.set("summary", None)
        self._set_alerts()

        # Give a failed category load another chance
        if not self.categories:
            self.state.set("categories", None)

    def _set_alerts(self, *alerts: Alert) -> None:
        self.state.set("alerts", list(alerts))
