from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.modules.customers import schemas
from app.modules.customers.services import CustomerService
from app.modules.loans.schemas import LoanResponse

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=List[schemas.CustomerResponse])
async def list_customers(db: AsyncSession = Depends(get_db)):
    """List all customers, newest first"""
    return await CustomerService.get_customers(db)


@router.post("", response_model=schemas.CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    data: schemas.CustomerCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a customer.

    - customer_id is generated when omitted
    - Reusing an existing customer_id is rejected with 409
    """
    return await CustomerService.create_customer(db, data)


@router.get("/{customer_id}", response_model=schemas.CustomerResponse)
async def get_customer(
    customer_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Get customer details"""
    return await CustomerService.get_customer(db, customer_id)


@router.get("/{customer_id}/loans", response_model=List[LoanResponse])
async def list_customer_loans(
    customer_id: str,
    db: AsyncSession = Depends(get_db)
):
    """List the customer's loans, newest first"""
    return await CustomerService.get_customer_loans(db, customer_id)


@router.get("/{customer_id}/overview", response_model=schemas.CustomerOverview)
async def get_customer_overview(
    customer_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    Customer overview.

    - Ledger (amount paid, balance, EMIs left) for every loan
    - Totals across all of the customer's loans
    """
    return await CustomerService.get_overview(db, customer_id)
