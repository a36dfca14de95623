from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional
import logging
import uuid

from app.core.database import persist
from app.core.exceptions import NotFoundError, DuplicateEntityError
from app.modules.loans.models import Loan
from app.modules.payments.models import Payment
from app.modules.payments.schemas import PaymentCreate

logger = logging.getLogger(__name__)


class PaymentService:
    """Records payments. Payments are append-only: no update, no delete."""

    @staticmethod
    def generate_payment_id() -> str:
        return f"PAY-{uuid.uuid4().hex[:8].upper()}"

    @staticmethod
    async def create_payment(db: AsyncSession, data: PaymentCreate) -> Payment:
        if await db.get(Loan, data.loan_id) is None:
            raise NotFoundError("Loan", data.loan_id)

        payment_id = data.payment_id or PaymentService.generate_payment_id()
        if await db.get(Payment, payment_id) is not None:
            raise DuplicateEntityError("Payment", payment_id)

        payment = Payment(
            payment_id=payment_id,
            loan_id=data.loan_id,
            amount=data.amount,
            payment_type=data.payment_type,
        )
        if data.payment_date is not None:
            payment.payment_date = data.payment_date

        await persist(db, payment)

        logger.info(f"Payment {payment.payment_id} of {payment.amount} "
                    f"({payment.payment_type.value}) recorded for loan {payment.loan_id}")
        return payment

    @staticmethod
    async def get_payment(db: AsyncSession, payment_id: str) -> Payment:
        payment = await db.get(Payment, payment_id)
        if payment is None:
            raise NotFoundError("Payment", payment_id)
        return payment

    @staticmethod
    async def get_payments(db: AsyncSession, loan_id: Optional[str] = None) -> List[Payment]:
        """All payments, most recent first"""
        query = select(Payment)
        if loan_id:
            query = query.where(Payment.loan_id == loan_id)
        result = await db.execute(query.order_by(Payment.payment_date.desc()))
        return list(result.scalars().all())
