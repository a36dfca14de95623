from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.modules.loans.models import LoanStatus


class LoanTermsRequest(BaseModel):
    principal_amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    interest_rate: Decimal = Field(
        ..., ge=0, max_digits=9, decimal_places=4, description="Annual interest rate in percent"
    )
    loan_period_years: int = Field(..., gt=0, le=100)


class LoanCreate(LoanTermsRequest):
    """Totals are computed server-side, never accepted from the caller"""
    loan_id: Optional[str] = Field(None, min_length=1, max_length=50)
    customer_id: str = Field(..., min_length=1, max_length=50)


class LoanTermsResponse(BaseModel):
    principal_amount: Decimal
    interest_rate: Decimal
    loan_period_years: int
    total_interest: Decimal
    total_amount: Decimal
    monthly_emi: Decimal


class LoanStatusUpdate(BaseModel):
    # Checked against LoanStatus by the service
    status: str


class LoanResponse(LoanTermsResponse):
    loan_id: str
    customer_id: str
    status: LoanStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LedgerResponse(BaseModel):
    amount_paid: Decimal
    balance_amount: Decimal
    emis_left: int
    payment_count: int

    class Config:
        from_attributes = True


class LoanLedgerResponse(BaseModel):
    loan: LoanResponse
    ledger: LedgerResponse
