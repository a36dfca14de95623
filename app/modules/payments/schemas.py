from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.modules.payments.models import PaymentType


class PaymentCreate(BaseModel):
    payment_id: Optional[str] = Field(None, min_length=1, max_length=50)
    loan_id: str = Field(..., min_length=1, max_length=50)
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    payment_type: PaymentType
    payment_date: Optional[datetime] = None


class PaymentResponse(BaseModel):
    payment_id: str
    loan_id: str
    amount: Decimal
    payment_type: PaymentType
    payment_date: Optional[datetime] = None

    class Config:
        from_attributes = True
