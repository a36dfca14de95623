from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from decimal import Decimal
from typing import List
import logging
import uuid

from app.core.database import persist
from app.core.exceptions import NotFoundError, DuplicateEntityError
from app.modules.customers.models import Customer
from app.modules.customers.schemas import CustomerCreate, CustomerOverview, CustomerResponse
from app.modules.loans.ledger import compute_ledger
from app.modules.loans.models import Loan, LoanStatus
from app.modules.loans.schemas import LoanLedgerResponse, LoanResponse, LedgerResponse
from app.modules.payments.models import Payment

logger = logging.getLogger(__name__)


class CustomerService:
    """Service layer for customers"""

    @staticmethod
    def generate_customer_id() -> str:
        return f"CUST-{uuid.uuid4().hex[:8].upper()}"

    @staticmethod
    async def create_customer(db: AsyncSession, data: CustomerCreate) -> Customer:
        customer_id = data.customer_id or CustomerService.generate_customer_id()
        if await db.get(Customer, customer_id) is not None:
            raise DuplicateEntityError("Customer", customer_id)

        customer = Customer(customer_id=customer_id, name=data.name)
        await persist(db, customer)

        logger.info(f"Customer {customer.customer_id} created")
        return customer

    @staticmethod
    async def get_customer(db: AsyncSession, customer_id: str) -> Customer:
        customer = await db.get(Customer, customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer

    @staticmethod
    async def get_customers(db: AsyncSession) -> List[Customer]:
        """All customers, newest first"""
        result = await db.execute(select(Customer).order_by(Customer.created_at.desc()))
        return list(result.scalars().all())

    @staticmethod
    async def get_customer_loans(db: AsyncSession, customer_id: str) -> List[Loan]:
        await CustomerService.get_customer(db, customer_id)
        result = await db.execute(
            select(Loan).where(Loan.customer_id == customer_id).order_by(Loan.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_overview(db: AsyncSession, customer_id: str) -> CustomerOverview:
        """Each loan of the customer with its ledger, plus totals across loans"""
        customer = await CustomerService.get_customer(db, customer_id)
        loans = await CustomerService.get_customer_loans(db, customer_id)

        payments_by_loan = {loan.loan_id: [] for loan in loans}
        if loans:
            result = await db.execute(
                select(Payment).where(Payment.loan_id.in_(list(payments_by_loan)))
            )
            for payment in result.scalars().all():
                payments_by_loan[payment.loan_id].append(payment)

        entries = []
        total_borrowed = Decimal(0)
        total_payable = Decimal(0)
        total_paid = Decimal(0)
        total_outstanding = Decimal(0)
        total_overpaid = Decimal(0)
        active_loans = 0

        for loan in loans:
            ledger = compute_ledger(loan, payments_by_loan[loan.loan_id])
            entries.append(LoanLedgerResponse(
                loan=LoanResponse.model_validate(loan),
                ledger=LedgerResponse.model_validate(ledger),
            ))
            total_borrowed += loan.principal_amount
            total_payable += loan.total_payable
            total_paid += ledger.amount_paid
            if ledger.balance_amount > 0:
                total_outstanding += ledger.balance_amount
            else:
                total_overpaid -= ledger.balance_amount
            if loan.status == LoanStatus.ACTIVE:
                active_loans += 1

        return CustomerOverview(
            customer=CustomerResponse.model_validate(customer),
            loans=entries,
            active_loans=active_loans,
            total_borrowed=total_borrowed,
            total_payable=total_payable,
            total_paid=total_paid,
            total_outstanding=total_outstanding,
            total_overpaid=total_overpaid,
        )
