from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from app.modules.loans.schemas import LoanLedgerResponse


class CustomerCreate(BaseModel):
    customer_id: Optional[str] = Field(None, min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=200)


class CustomerResponse(BaseModel):
    customer_id: str
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CustomerOverview(BaseModel):
    """
    Every loan of a customer with its ledger, plus portfolio totals.

    total_outstanding only counts loans with a positive balance; overpayment
    on one loan is reported in total_overpaid and never offsets another.
    """
    customer: CustomerResponse
    loans: List[LoanLedgerResponse]
    active_loans: int
    total_borrowed: Decimal
    total_payable: Decimal
    total_paid: Decimal
    total_outstanding: Decimal
    total_overpaid: Decimal
