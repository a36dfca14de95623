"""Tests for the error taxonomy."""

from app.core.exceptions import (
    DivisionUndefinedError,
    DuplicateEntityError,
    InvalidArgumentError,
    LoanManagerError,
    NotFoundError,
    StorageFailureError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_loan_manager_error_is_exception(self) -> None:
        assert isinstance(LoanManagerError("test"), Exception)

    def test_every_kind_is_loan_manager_error(self) -> None:
        errors = [
            InvalidArgumentError("bad"),
            NotFoundError("Loan", "LN-1"),
            DuplicateEntityError("Loan", "LN-1"),
            DivisionUndefinedError("zero"),
            StorageFailureError("down"),
        ]
        for err in errors:
            assert isinstance(err, LoanManagerError)

    def test_not_found_message(self) -> None:
        err = NotFoundError("Loan", "LN-404")
        assert str(err) == "Loan not found"
        assert err.entity == "Loan"
        assert err.entity_id == "LN-404"

    def test_duplicate_message(self) -> None:
        err = DuplicateEntityError("Customer", "CUST-1")
        assert err.message == "Customer 'CUST-1' already exists"
