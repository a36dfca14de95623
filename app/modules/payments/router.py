from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.modules.payments import schemas
from app.modules.payments.services import PaymentService

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.get("", response_model=List[schemas.PaymentResponse])
async def list_payments(
    loan_id: Optional[str] = Query(None, description="Only payments for this loan"),
    db: AsyncSession = Depends(get_db)
):
    """List payments, most recent first"""
    return await PaymentService.get_payments(db, loan_id=loan_id)


@router.post("", response_model=schemas.PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    data: schemas.PaymentCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record a payment against a loan.

    - payment_type is EMI or LUMP_SUM
    - payment_id is generated when omitted
    - The loan's status is not changed, even when the balance reaches zero
    """
    return await PaymentService.create_payment(db, data)


@router.get("/{payment_id}", response_model=schemas.PaymentResponse)
async def get_payment(
    payment_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Get payment details"""
    return await PaymentService.get_payment(db, payment_id)
