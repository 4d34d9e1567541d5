from typing import Any

import requests
from pydantic import BaseModel, ValidationError

from quizzler.config import QuizConfig
from quizzler.quiz.domain.errors import FetchError, FetchErrorKind
from quizzler.quiz.domain.models import Category, FetchResult, Question
from quizzler.quiz.domain.ports import ITriviaGateway
from quizzler.shared.telemetry import Telemetry, measure_time, record_fetch_failure

# Open Trivia DB response codes
RESPONSE_OK = 0
RESPONSE_NO_RESULTS = 1


# --- Wire Payloads ---
class CategoryListPayload(BaseModel):
    trivia_categories: list[Category]


class QuestionRecord(BaseModel):
    question: str
    correct_answer: str
    incorrect_answers: list[str] = []
    category: str | None = None
    difficulty: str | None = None
    type: str | None = None

    def to_domain(self) -> Question:
        return Question(
            text=self.question,
            correct_answer=self.correct_answer,
            incorrect_answers=tuple(self.incorrect_answers),
            category=self.category,
            difficulty=self.difficulty,
            type=self.type,
        )


class QuestionBatchPayload(BaseModel):
    response_code: int = RESPONSE_OK
    results: list[QuestionRecord] = []


class OpenTriviaGateway(ITriviaGateway):
    """
    Fetch Gateway backed by the Open Trivia DB HTTP API.
    One attempt per call; every failure comes back as a typed FetchResult.
    """

    def __init__(
        self,
        category_url: str = QuizConfig.CATEGORY_URL,
        question_url: str = QuizConfig.QUESTION_URL,
        timeout: float = QuizConfig.REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.category_url = category_url
        self.question_url = question_url
        self.timeout = timeout
        self.http = session or requests.Session()
        self.telemetry = Telemetry("OpenTriviaGateway")

    @measure_time("fetch_categories")
    def fetch_categories(self) -> FetchResult[list[Category]]:
        try:
            body = self._get_json(self.category_url, params=None)
            payload = CategoryListPayload.model_validate(body)
        except FetchError as e:
            return self._fail("categories", e)
        except ValidationError as e:
            return self._fail(
                "categories", FetchError(FetchErrorKind.MALFORMED_PAYLOAD, str(e))
            )

        self.telemetry.log_info("Categories Loaded", count=len(payload.trivia_categories))
        return FetchResult.success(payload.trivia_categories)

    @measure_time("fetch_questions")
    def fetch_questions(
        self, category_id: str | None, count: int
    ) -> FetchResult[list[Question]]:
        if not 1 <= count <= QuizConfig.MAX_QUESTION_COUNT:
            raise ValueError(
                f"count must be within 1..{QuizConfig.MAX_QUESTION_COUNT}, got {count}"
            )

        params: dict[str, Any] = {"amount": count}
        if category_id:
            params["category"] = category_id

        try:
            body = self._get_json(self.question_url, params=params)
            payload = QuestionBatchPayload.model_validate(body)
        except FetchError as e:
            return self._fail("questions", e)
        except ValidationError as e:
            return self._fail(
                "questions", FetchError(FetchErrorKind.MALFORMED_PAYLOAD, str(e))
            )

        if payload.response_code == RESPONSE_NO_RESULTS or (
            payload.response_code == RESPONSE_OK and not payload.results
        ):
            return self._fail(
                "questions",
                FetchError(
                    FetchErrorKind.NO_QUESTIONS_AVAILABLE,
                    f"category={category_id} amount={count}",
                ),
            )
        if payload.response_code != RESPONSE_OK:
            return self._fail(
                "questions",
                FetchError(
                    FetchErrorKind.BAD_STATUS,
                    f"provider response_code={payload.response_code}",
                ),
            )

        questions = [record.to_domain() for record in payload.results]
        self.telemetry.log_info(
            "Questions Loaded", category_id=category_id, count=len(questions)
        )
        return FetchResult.success(questions)

    # --- Internals ---
    def _get_json(self, url: str, params: dict[str, Any] | None) -> Any:
        """Performs a single GET. Raises FetchError on any transport problem."""
        try:
            response = self.http.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(FetchErrorKind.NETWORK_FAILURE, str(e)) from e

        if not response.ok:
            raise FetchError(
                FetchErrorKind.BAD_STATUS, f"HTTP {response.status_code} {response.reason}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(FetchErrorKind.MALFORMED_PAYLOAD, "Body is not JSON") from e

    def _fail(self, endpoint: str, error: FetchError) -> FetchResult[Any]:
        record_fetch_failure(endpoint, error.kind.value)
        self.telemetry.log_warning(
            "Fetch Failed", endpoint=endpoint, kind=error.kind.value, detail=error.detail
        )
        return FetchResult.failure(error)
