from sqlalchemy import Column, String, Numeric, ForeignKey, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from app.core.database import Base
import enum


class PaymentType(str, enum.Enum):
    """How a payment was made"""
    EMI = "EMI"
    LUMP_SUM = "LUMP_SUM"


class Payment(Base):
    """Immutable repayment record against exactly one loan"""
    __tablename__ = "payments"

    payment_id = Column(String(50), primary_key=True, index=True)
    loan_id = Column(String(50), ForeignKey("loans.loan_id"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    payment_type = Column(SQLEnum(PaymentType, name="payment_type"), nullable=False)
    payment_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
