import os
from enum import Enum
from typing import Final


class Rank(Enum):
    # Enum Member = ("Label", inclusive upper bound out of 10 questions)
    NOOB = ("Quiz Noob", 3)
    APPRENTICE = ("Quizlet Apprentice", 6)
    QUIZZARD = ("Quizzard", 8)
    ULTIMATE = ("Ultimate Quizzler", 10)

    def __init__(self, label: str, upper_bound: int):
        self.label = label
        self.upper_bound = upper_bound

    @classmethod
    def all_labels(cls) -> list[str]:
        """Returns rank labels from lowest to highest."""
        return [r.label for r in cls]


class QuizConfig:
    # --- App Identity ---
    APP_TITLE = "Quizzler"

    # --- Providers (Open Trivia DB) ---
    CATEGORY_URL: str = os.getenv(
        "QUIZZLER_CATEGORY_URL", "https://opentdb.com/api_category.php"
    )
    QUESTION_URL: str = os.getenv("QUIZZLER_QUESTION_URL", "https://opentdb.com/api.php")
    REQUEST_TIMEOUT: float = float(os.getenv("QUIZZLER_REQUEST_TIMEOUT", "10"))

    # --- Game Rules ---
    QUESTION_COUNT: int = int(os.getenv("QUIZZLER_QUESTION_COUNT", "10"))
    MAX_QUESTION_COUNT: Final[int] = 50  # Provider limit per request
    RANK_SCALE: Final[int] = 10  # Rank bounds are expressed out of this many questions

    # --- Observability ---
    METRICS_PORT: int = int(os.getenv("QUIZZLER_METRICS_PORT", "8000"))
