from quizzler.config import QuizConfig, Rank


class RankCalculator:
    """
    Maps a final score to a rank label.

    Rank bounds are defined for a 10 question quiz and scale proportionally
    for other batch sizes: a score qualifies for a bound when
    ``score * 10 <= bound * total``.
    """

    @staticmethod
    def rank(score: int, total_questions: int) -> str:
        if total_questions <= 0:
            raise ValueError(f"total_questions must be positive, got {total_questions}")
        if not 0 <= score <= total_questions:
            raise ValueError(f"score {score} is outside 0..{total_questions}")

        scaled = score * QuizConfig.RANK_SCALE
        for rank in Rank:
            if scaled <= rank.upper_bound * total_questions:
                return rank.label

        # Unreachable: the top bound equals the scale
        return Rank.ULTIMATE.label
