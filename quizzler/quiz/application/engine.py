import random
from collections.abc import Sequence

from quizzler.fsm import QuizAction, QuizState, QuizStateMachine
from quizzler.quiz.domain.errors import EmptyQuestionSetError, InvalidStateError
from quizzler.quiz.domain.models import (
    AdvanceOutcome,
    AnswerOutcome,
    Completed,
    NextQuestion,
    Question,
    QuizSessionState,
)
from quizzler.quiz.domain.rank import RankCalculator
from quizzler.quiz.domain.shuffler import AnswerShuffler
from quizzler.shared.telemetry import Telemetry, measure_time


class QuizSessionEngine:
    """
    Owns the quiz session and drives its lifecycle:
    IDLE -> AWAITING_ANSWER <-> ANSWERED -> COMPLETED, and back to IDLE on reset.

    Every operation either succeeds or raises an EngineError with the session
    left untouched.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._session = QuizSessionState()
        self._rng = rng
        self.telemetry = Telemetry("QuizSessionEngine")

    # --- Read Model ---
    @property
    def state(self) -> QuizState:
        return self._session.state

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def current_index(self) -> int:
        return self._session.current_index

    @property
    def total_questions(self) -> int:
        return len(self._session.questions)

    def current_question(self) -> Question:
        self._require_loaded("current_question")
        # After completion the index points past the end; show the last question
        idx = min(self._session.current_index, len(self._session.questions) - 1)
        return self._session.questions[idx]

    def current_choices(self) -> list[str]:
        self._require_loaded("current_choices")
        return list(self._session.choices)

    # --- Lifecycle ---
    @measure_time("start_session")
    def start_session(self, questions: Sequence[Question]) -> None:
        if not questions:
            raise EmptyQuestionSetError()

        state = self._transition(QuizAction.START, "start_session")
        self._session = QuizSessionState(questions=tuple(questions), state=state)
        self._shuffle_current()

        self.telemetry.log_info("Session Started", total=self.total_questions)

    @measure_time("submit_answer")
    def submit_answer(self, choice: str) -> AnswerOutcome:
        state = self._transition(QuizAction.SUBMIT_ANSWER, "submit_answer")
        question = self._session.questions[self._session.current_index]

        is_correct = choice == question.correct_answer
        if is_correct:
            self._session.record_correct_answer()
        self._session.state = state

        self.telemetry.log_info(
            "Answer Submitted",
            index=self._session.current_index,
            correct=is_correct,
            score=self._session.score,
        )
        return AnswerOutcome(
            is_correct=is_correct,
            correct_answer=question.correct_answer,
            choice=choice,
        )

    @measure_time("advance")
    def advance(self) -> AdvanceOutcome:
        remaining = self._session.current_index + 1 < len(self._session.questions)
        action = QuizAction.NEXT_QUESTION if remaining else QuizAction.FINISH_QUIZ
        state = self._transition(action, "advance")

        self._session.next_question()
        self._session.state = state

        if remaining:
            self._shuffle_current()
            return NextQuestion(index=self._session.current_index)

        total = len(self._session.questions)
        rank = RankCalculator.rank(self._session.score, total)
        self.telemetry.log_info(
            "Session Completed", score=self._session.score, total=total, rank=rank
        )
        return Completed(rank=rank, score=self._session.score, total=total)

    def reset(self) -> None:
        self._transition(QuizAction.RESET, "reset")
        self._session.reset()
        self.telemetry.log_info("Session Reset")

    # --- Internals ---
    def _transition(self, action: QuizAction, operation: str) -> QuizState:
        """Validates the action against the current state without mutating it."""
        fsm = QuizStateMachine(initial_state=self._session.state)
        if not fsm.can(action):
            raise InvalidStateError(operation, self._session.state)
        return fsm.transition(action)

    def _require_loaded(self, operation: str) -> None:
        if self._session.state == QuizState.IDLE:
            raise InvalidStateError(operation, self._session.state)

    def _shuffle_current(self) -> None:
        question = self._session.questions[self._session.current_index]
        self._session.choices = tuple(
            AnswerShuffler.shuffle(
                question.correct_answer, question.incorrect_answers, self._rng
            )
        )
