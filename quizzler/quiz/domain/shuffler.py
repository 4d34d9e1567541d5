import random
from collections.abc import Sequence


class AnswerShuffler:
    """
    Pure domain logic for ordering the answer choices of a question.
    """

    @staticmethod
    def shuffle(
        correct_answer: str,
        incorrect_answers: Sequence[str],
        rng: random.Random | None = None,
    ) -> list[str]:
        """
        Returns the correct answer and every incorrect answer, each exactly
        once, in random order. Inputs are never mutated.

        Args:
            correct_answer: The right answer
            incorrect_answers: The distractors (may be empty)
            rng: Optional random source, for deterministic ordering in tests

        Example:
            >>> AnswerShuffler.shuffle("Paris", ["Rome", "Berlin"])
            >>> # e.g. ['Berlin', 'Paris', 'Rome']
        """
        answers = [*incorrect_answers, correct_answer]
        (rng or random).shuffle(answers)
        return answers
