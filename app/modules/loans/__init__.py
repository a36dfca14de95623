# Loans module
from app.modules.loans.models import Loan, LoanStatus
from app.modules.loans.calculator import LoanTerms, compute_terms
from app.modules.loans.ledger import Ledger, compute_ledger
from app.modules.loans.services import LoanService
from app.modules.loans.router import router

__all__ = [
    "Loan", "LoanStatus", "LoanTerms", "Ledger",
    "compute_terms", "compute_ledger", "LoanService", "router"
]
