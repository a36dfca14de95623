"""
Repayment ledger derived from a loan's fixed terms and its payments.

Nothing here is persisted. The ledger is recomputed from whatever payment
snapshot the caller passes in.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING, localcontext
from typing import Iterable, Protocol

from app.core.exceptions import DivisionUndefinedError

# An unrounded EMI like 1000/12 is cut at 28 significant digits, so
# balance / EMI can land a relative 1E-27 above a whole number. A quotient
# that close to a whole number counts as that number.
RELATIVE_TOLERANCE = Decimal("1E-25")


class HasTerms(Protocol):
    total_payable: Decimal
    monthly_installment: Decimal


class HasAmount(Protocol):
    amount: Decimal


@dataclass(frozen=True)
class Ledger:
    amount_paid: Decimal
    balance_amount: Decimal
    emis_left: int
    payment_count: int


def remaining_installments(balance_amount: Decimal, monthly_installment: Decimal) -> int:
    """Installments still owed; never negative"""
    if monthly_installment <= 0:
        raise DivisionUndefinedError("monthly installment is zero; remaining EMIs are undefined")
    if balance_amount <= 0:
        return 0
    with localcontext() as ctx:
        ctx.prec = 60
        quotient = balance_amount / monthly_installment
        nearest = quotient.to_integral_value()
        if abs(quotient - nearest) <= nearest * RELATIVE_TOLERANCE:
            return int(nearest)
        return int(quotient.to_integral_value(rounding=ROUND_CEILING))


def compute_ledger(loan: HasTerms, payments: Iterable[HasAmount]) -> Ledger:
    """
    Sum the payments and derive balance and EMIs left.

    A negative balance means the loan was overpaid; that is reported as is.
    """
    amount_paid = Decimal(0)
    payment_count = 0
    for payment in payments:
        amount_paid += payment.amount
        payment_count += 1

    balance_amount = loan.total_payable - amount_paid

    return Ledger(
        amount_paid=amount_paid,
        balance_amount=balance_amount,
        emis_left=remaining_installments(balance_amount, loan.monthly_installment),
        payment_count=payment_count,
    )
