from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quizzler.config import Rank
from quizzler.fsm import QuizState
from quizzler.quiz.domain.errors import FetchError

T = TypeVar("T")


# --- Entities ---
class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Open Trivia DB sends numeric ids
        return str(value) if isinstance(value, int) else value


class Question(BaseModel):
    """
    A single trivia question, immutable once received.
    Text fields are kept in their raw (possibly entity-encoded) form.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    correct_answer: str
    incorrect_answers: tuple[str, ...] = ()
    category: str | None = None
    difficulty: str | None = None
    type: str | None = None


# --- Session ---
class QuizSessionState(BaseModel):
    """
    Encapsulates the state of a running quiz.
    Owned exclusively by the QuizSessionEngine.
    """

    questions: tuple[Question, ...] = ()
    current_index: int = 0
    score: int = 0
    state: QuizState = QuizState.IDLE
    choices: tuple[str, ...] = ()

    def record_correct_answer(self) -> None:
        self.score += 1

    def next_question(self) -> None:
        self.current_index += 1

    def reset(self) -> None:
        self.questions = ()
        self.current_index = 0
        self.score = 0
        self.state = QuizState.IDLE
        self.choices = ()


# --- Outcomes (DTOs) ---
class AnswerOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_correct: bool
    correct_answer: str
    choice: str


class NextQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int


class Completed(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: str
    score: int = Field(ge=0)
    total: int = Field(gt=0)

    @field_validator("rank")
    @classmethod
    def _known_rank(cls, value: str) -> str:
        if value not in Rank.all_labels():
            raise ValueError(f"unknown rank {value!r}")
        return value


AdvanceOutcome = NextQuestion | Completed


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """
    Either a value or a FetchError. Gateways return this instead of raising.
    """

    value: T | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)
