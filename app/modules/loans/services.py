from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional, Tuple
import logging
import uuid

from app.core.database import persist, commit
from app.core.exceptions import InvalidArgumentError, NotFoundError, DuplicateEntityError
from app.modules.customers.models import Customer
from app.modules.loans.models import Loan, LoanStatus
from app.modules.loans.schemas import LoanCreate, LoanTermsRequest, LoanTermsResponse
from app.modules.loans.calculator import compute_terms
from app.modules.loans.ledger import Ledger, compute_ledger
from app.modules.payments.models import Payment

logger = logging.getLogger(__name__)


def parse_status(requested: str) -> LoanStatus:
    try:
        return LoanStatus(requested)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in LoanStatus)
        raise InvalidArgumentError(f"Invalid status '{requested}'. Use one of: {allowed}") from exc


def validate_status_transition(current: LoanStatus, requested: str) -> LoanStatus:
    """
    Check a requested status change against the loan lifecycle.

    Repeating the current status is a no-op. The only real transition is
    ACTIVE -> PAID_OFF; a paid-off loan cannot be reopened.
    """
    target = parse_status(requested)
    if target == current:
        return target
    if current == LoanStatus.ACTIVE and target == LoanStatus.PAID_OFF:
        return target
    raise InvalidArgumentError(f"Cannot change loan status from {current.value} to {target.value}")


class LoanService:
    """Service layer for loans and their derived ledger"""

    @staticmethod
    def generate_loan_id() -> str:
        return f"LN-{uuid.uuid4().hex[:8].upper()}"

    @staticmethod
    def calculate_terms(request: LoanTermsRequest) -> LoanTermsResponse:
        """Preview the terms a loan would be created with"""
        terms = compute_terms(request.principal_amount, request.interest_rate, request.loan_period_years)
        return LoanTermsResponse(
            principal_amount=request.principal_amount,
            interest_rate=request.interest_rate,
            loan_period_years=request.loan_period_years,
            total_interest=terms.total_interest,
            total_amount=terms.total_payable,
            monthly_emi=terms.monthly_installment,
        )

    @staticmethod
    async def create_loan(db: AsyncSession, data: LoanCreate) -> Loan:
        """Create a loan with terms fixed by the calculator"""
        customer = await db.get(Customer, data.customer_id)
        if customer is None:
            raise NotFoundError("Customer", data.customer_id)

        loan_id = data.loan_id or LoanService.generate_loan_id()
        if await db.get(Loan, loan_id) is not None:
            raise DuplicateEntityError("Loan", loan_id)

        terms = compute_terms(data.principal_amount, data.interest_rate, data.loan_period_years)

        loan = Loan(
            loan_id=loan_id,
            customer_id=data.customer_id,
            principal_amount=data.principal_amount,
            interest_rate=data.interest_rate,
            loan_period_years=data.loan_period_years,
            total_interest=terms.total_interest,
            total_amount=terms.total_payable,
            monthly_emi=terms.monthly_installment,
            status=LoanStatus.ACTIVE,
        )
        await persist(db, loan)

        logger.info(f"Loan {loan.loan_id} created for customer {loan.customer_id}: "
                    f"total {terms.total_payable}, EMI {terms.monthly_installment}")
        return loan

    @staticmethod
    async def get_loan(db: AsyncSession, loan_id: str) -> Loan:
        loan = await db.get(Loan, loan_id)
        if loan is None:
            raise NotFoundError("Loan", loan_id)
        return loan

    @staticmethod
    async def get_loans(
        db: AsyncSession,
        status: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> List[Loan]:
        """All loans, newest first"""
        query = select(Loan)
        if status:
            query = query.where(Loan.status == parse_status(status))
        if customer_id:
            query = query.where(Loan.customer_id == customer_id)
        result = await db.execute(query.order_by(Loan.created_at.desc()))
        return list(result.scalars().all())

    @staticmethod
    async def update_status(db: AsyncSession, loan_id: str, requested: str) -> Loan:
        """Explicit, caller-driven status change"""
        parse_status(requested)
        loan = await LoanService.get_loan(db, loan_id)

        target = validate_status_transition(loan.status, requested)
        if target == loan.status:
            return loan

        previous = loan.status
        loan.status = target
        await commit(db, loan)

        logger.info(f"Loan {loan_id} status changed from {previous.value} to {target.value}")
        return loan

    @staticmethod
    async def get_loan_payments(db: AsyncSession, loan_id: str) -> List[Payment]:
        await LoanService.get_loan(db, loan_id)
        result = await db.execute(
            select(Payment).where(Payment.loan_id == loan_id).order_by(Payment.payment_date.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_ledger(db: AsyncSession, loan_id: str) -> Tuple[Loan, Ledger]:
        """Recompute the ledger from the loan's current payment set"""
        loan = await LoanService.get_loan(db, loan_id)
        result = await db.execute(select(Payment).where(Payment.loan_id == loan_id))
        return loan, compute_ledger(loan, result.scalars().all())
