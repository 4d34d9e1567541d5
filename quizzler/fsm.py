from enum import Enum, auto
import logging

from quizzler.quiz.domain.errors import InvalidStateError

logger = logging.getLogger(__name__)


class QuizState(Enum):
    IDLE = auto()  # No questions loaded
    AWAITING_ANSWER = auto()  # Question shown, no selection made
    ANSWERED = auto()  # Selection made, feedback shown, waiting for advance
    COMPLETED = auto()  # All questions exhausted


class QuizAction(Enum):
    START = auto()
    SUBMIT_ANSWER = auto()
    NEXT_QUESTION = auto()
    FINISH_QUIZ = auto()
    RESET = auto()


class QuizStateMachine:
    """
    Pure FSM Logic.
    Only cares about State Transitions, not UI or network.
    """

    def __init__(self, initial_state: QuizState = QuizState.IDLE):
        self._state = initial_state

    @property
    def current_state(self) -> QuizState:
        return self._state

    def can(self, action: QuizAction) -> bool:
        return self._next_state(action) is not None

    def transition(self, action: QuizAction) -> QuizState:
        """
        Applies the action or raises InvalidStateError, leaving the state as is.
        """
        previous = self._state
        target = self._next_state(action)

        if target is None:
            logger.error(f"⛔ INVALID TRANSITION: {previous.name} + {action.name}")
            raise InvalidStateError(action.name.lower(), previous)

        self._state = target
        logger.info(f"🔄 FSM: {previous.name} --[{action.name}]--> {target.name}")
        return target

    def _next_state(self, action: QuizAction) -> QuizState | None:
        """The Transition Table."""
        match (self._state, action):
            # A new session replaces the current one from any state
            case (_, QuizAction.START):
                return QuizState.AWAITING_ANSWER

            # AWAITING -> ANSWERED
            case (QuizState.AWAITING_ANSWER, QuizAction.SUBMIT_ANSWER):
                return QuizState.ANSWERED

            # ANSWERED -> AWAITING (Next) or COMPLETED (Finish)
            case (QuizState.ANSWERED, QuizAction.NEXT_QUESTION):
                return QuizState.AWAITING_ANSWER
            case (QuizState.ANSWERED, QuizAction.FINISH_QUIZ):
                return QuizState.COMPLETED

            case (_, QuizAction.RESET):
                return QuizState.IDLE

            case _:
                return None
