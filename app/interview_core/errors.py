"""
Error kinds raised by the session engine.

Domain errors are raised before any state changes, so a caller can surface
them (toast, banner) and carry on. PersistenceError is the only one the engine
also records for later, because the operation that hit it still succeeds.
"""


class InterviewError(Exception):
    """Base class for everything the engine raises on purpose."""


class ValidationError(InterviewError, ValueError):
    """A required field is empty or an input is malformed."""


class NotFoundError(InterviewError, LookupError):
    def __init__(self, session_id: str):
        super().__init__(f"Interview {session_id!r} not found.")
        self.session_id = session_id


class IndexOutOfRange(InterviewError, IndexError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Question index {index} is out of range for {size} questions.")
        self.index = index
        self.size = size


class InvalidStateError(InterviewError):
    """Mutation attempted on a session that is already completed."""


class PersistenceError(InterviewError):
    """The key-value store could not be read or written."""


class EvaluationError(InterviewError, ValueError):
    """The feedback backend returned a result that does not fit the session."""
