from enum import Enum


# --- Engine Errors (caller bugs) ---
class EngineError(Exception):
    """Base class for Quiz Session Engine failures."""


class EmptyQuestionSetError(EngineError):
    def __init__(self) -> None:
        super().__init__("Cannot start a session without questions")


class InvalidStateError(EngineError):
    """An operation was invoked outside the state it requires."""

    def __init__(self, operation: str, state: Enum) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"'{operation}' is not allowed in state {state.name}")


# --- Fetch Errors (provider failures) ---
class FetchErrorKind(str, Enum):
    NETWORK_FAILURE = "network_failure"
    BAD_STATUS = "bad_status"
    MALFORMED_PAYLOAD = "malformed_payload"
    NO_QUESTIONS_AVAILABLE = "no_questions_available"


class FetchError(Exception):
    def __init__(self, kind: FetchErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
