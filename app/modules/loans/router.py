from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.modules.loans import schemas
from app.modules.loans.services import LoanService
from app.modules.payments.schemas import PaymentResponse

router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.get("", response_model=List[schemas.LoanResponse])
async def list_loans(
    status: Optional[str] = Query(None, description="ACTIVE or PAID_OFF"),
    customer_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """List loans, newest first"""
    return await LoanService.get_loans(db, status=status, customer_id=customer_id)


@router.post("", response_model=schemas.LoanResponse, status_code=status.HTTP_201_CREATED)
async def create_loan(
    data: schemas.LoanCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a loan for an existing customer.

    - Simple interest: total = principal + principal * years * rate / 100
    - Monthly EMI = total / (years * 12), stored unrounded
    - Starts ACTIVE
    """
    return await LoanService.create_loan(db, data)


@router.post("/calculate", response_model=schemas.LoanTermsResponse)
async def calculate_loan(data: schemas.LoanTermsRequest):
    """Preview loan terms without creating a loan"""
    return LoanService.calculate_terms(data)


@router.get("/{loan_id}", response_model=schemas.LoanResponse)
async def get_loan(
    loan_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Get loan details"""
    return await LoanService.get_loan(db, loan_id)


@router.put("/{loan_id}/status", response_model=schemas.LoanResponse)
async def update_loan_status(
    loan_id: str,
    data: schemas.LoanStatusUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update loan status.

    - Only ACTIVE -> PAID_OFF is allowed
    - Requesting the current status again is a no-op
    """
    return await LoanService.update_status(db, loan_id, data.status)


@router.get("/{loan_id}/ledger", response_model=schemas.LoanLedgerResponse)
async def get_loan_ledger(
    loan_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    Loan ledger, recomputed from the current payments.

    - amount_paid, balance_amount (negative when overpaid), emis_left
    """
    loan, ledger = await LoanService.get_ledger(db, loan_id)
    return schemas.LoanLedgerResponse(
        loan=schemas.LoanResponse.model_validate(loan),
        ledger=schemas.LedgerResponse.model_validate(ledger),
    )


@router.get("/{loan_id}/payments", response_model=List[PaymentResponse])
async def list_loan_payments(
    loan_id: str,
    db: AsyncSession = Depends(get_db)
):
    """List payments made against the loan, most recent first"""
    return await LoanService.get_loan_payments(db, loan_id)
