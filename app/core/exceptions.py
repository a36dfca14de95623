"""Error taxonomy for the loan manager.

Services and the pure loan components raise these; ``main.py`` maps them
to HTTP responses.
"""


class LoanManagerError(Exception):
    """Base exception for all loan manager errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(LoanManagerError):
    """Raised for malformed, missing or out-of-range input."""


class NotFoundError(LoanManagerError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntityError(LoanManagerError):
    """Raised when a caller-assigned identifier is already taken."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} '{entity_id}' already exists")
        self.entity = entity
        self.entity_id = entity_id


class DivisionUndefinedError(LoanManagerError):
    """Raised when a loan has a zero installment and no EMI count exists."""


class StorageFailureError(LoanManagerError):
    """Raised when the database layer fails. The cause is chained, not interpreted."""
