from abc import ABC, abstractmethod

from quizzler.quiz.domain.models import Category, FetchResult, Question


class ITriviaGateway(ABC):
    """
    Boundary to the Category and Question Providers.
    Implementations never raise for provider failures; they return a
    FetchResult carrying a FetchError instead.
    """

    @abstractmethod
    def fetch_categories(self) -> FetchResult[list[Category]]:
        pass

    @abstractmethod
    def fetch_questions(
        self, category_id: str | None, count: int
    ) -> FetchResult[list[Question]]:
        """
        category_id=None leaves the category choice to the provider
        (unrestricted mix).
        """
        pass
