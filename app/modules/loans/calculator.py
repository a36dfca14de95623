"""
Simple-interest loan terms.

The installment is fixed when the loan is created and is kept unrounded;
display rounding happens at the edges.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from app.core.exceptions import InvalidArgumentError

MONTHS_PER_YEAR = 12
HUNDRED = Decimal(100)

DecimalLike = Union[Decimal, int, str]


@dataclass(frozen=True)
class LoanTerms:
    total_interest: Decimal
    total_payable: Decimal
    monthly_installment: Decimal


def to_decimal(value: DecimalLike, name: str) -> Decimal:
    """Coerce an exact numeric input to Decimal. Floats are refused."""
    if isinstance(value, (bool, float)):
        raise InvalidArgumentError(f"{name} must be an exact decimal, got {type(value).__name__}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} is not a valid decimal: {value!r}") from exc
    if not result.is_finite():
        raise InvalidArgumentError(f"{name} must be finite")
    return result


def compute_terms(
    principal: DecimalLike,
    annual_rate_percent: DecimalLike,
    term_years: int,
) -> LoanTerms:
    principal = to_decimal(principal, "principal")
    rate = to_decimal(annual_rate_percent, "annual_rate_percent")

    if principal <= 0:
        raise InvalidArgumentError("principal must be positive")
    if rate < 0:
        raise InvalidArgumentError("annual_rate_percent must not be negative")
    if isinstance(term_years, bool) or not isinstance(term_years, int):
        raise InvalidArgumentError("term_years must be an integer")
    if term_years <= 0:
        raise InvalidArgumentError("term_years must be positive")

    total_interest = principal * term_years * (rate / HUNDRED)
    total_payable = principal + total_interest
    monthly_installment = total_payable / (term_years * MONTHS_PER_YEAR)

    return LoanTerms(
        total_interest=total_interest,
        total_payable=total_payable,
        monthly_installment=monthly_installment,
    )
