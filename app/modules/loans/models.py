from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from app.core.database import Base, ExactDecimal
import enum


class LoanStatus(str, enum.Enum):
    """Loan lifecycle. ACTIVE -> PAID_OFF only."""
    ACTIVE = "ACTIVE"
    PAID_OFF = "PAID_OFF"


class Loan(Base):
    """Loan with simple-interest terms fixed at creation"""
    __tablename__ = "loans"

    loan_id = Column(String(50), primary_key=True, index=True)
    customer_id = Column(String(50), ForeignKey("customers.customer_id"), nullable=False, index=True)

    # Terms as requested
    principal_amount = Column(Numeric(15, 2), nullable=False)
    interest_rate = Column(ExactDecimal, nullable=False)  # annual %
    loan_period_years = Column(Integer, nullable=False)

    # Derived once by the calculator, never recomputed
    total_interest = Column(ExactDecimal, nullable=False)
    total_amount = Column(ExactDecimal, nullable=False)
    monthly_emi = Column(ExactDecimal, nullable=False)

    status = Column(SQLEnum(LoanStatus, name="loan_status"), default=LoanStatus.ACTIVE, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def total_payable(self):
        return self.total_amount

    @property
    def monthly_installment(self):
        return self.monthly_emi
