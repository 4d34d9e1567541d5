from quizzler.fsm import QuizState
from quizzler.quiz.presentation.viewmodel import QuizViewModel


class QuizDriver:
    """Fluent wrapper that plays the quiz the way a user clicks through it."""

    def __init__(self, vm: QuizViewModel):
        self.vm = vm

    @property
    def state(self) -> QuizState:
        return self.vm.current_state

    def assert_state(self, expected: QuizState):
        assert self.state == expected, f"Expected state '{expected.name}', but got '{self.state.name}'"
        return self

    def start(self, category_id: str | None = None):
        self.vm.load_categories()
        self.vm.start_quiz(category_id)
        return self

    def answer_correctly(self):
        self.vm.select_answer(self.vm.engine.current_question().correct_answer)
        return self

    def answer_incorrectly(self):
        correct = self.vm.engine.current_question().correct_answer
        wrong = next(c for c, _ in self.vm.choice_labels if c != correct)
        self.vm.select_answer(wrong)
        return self

    def next(self):
        self.vm.next_step()
        return self

    def reset(self):
        self.vm.reset()
        return self

    def assert_score(self, expected_score: int):
        assert self.vm.score == expected_score, (
            f"Expected score {expected_score}, got {self.vm.score}"
        )
        return self

    def assert_rank(self, expected_rank: str):
        assert self.vm.summary is not None, "Quiz not completed"
        assert self.vm.summary.rank == expected_rank, (
            f"Expected rank '{expected_rank}', got '{self.vm.summary.rank}'"
        )
        return self
