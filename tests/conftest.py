"""
Test configuration and fixtures for loan manager tests.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from typing import AsyncGenerator
from decimal import Decimal

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from app.core.database import Base, get_db
from main import app


# ============================================================
# Database Fixtures
# ============================================================

# Use SQLite for testing (in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create a fresh test database engine per test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for each test"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ============================================================
# Domain Fixtures
# ============================================================

@pytest.fixture
async def test_customer(db_session):
    """Create a test customer"""
    from app.modules.customers.models import Customer

    customer = Customer(customer_id="CUST-001", name="Asha Rao")

    db_session.add(customer)
    await db_session.commit()
    await db_session.refresh(customer)

    return customer


@pytest.fixture
async def test_loan(db_session, test_customer):
    """Create a 100000 loan at 10% for 2 years (EMI 5000)"""
    from app.modules.loans.schemas import LoanCreate
    from app.modules.loans.services import LoanService

    return await LoanService.create_loan(
        db_session,
        LoanCreate(
            loan_id="LN-001",
            customer_id=test_customer.customer_id,
            principal_amount=Decimal("100000.00"),
            interest_rate=Decimal("10"),
            loan_period_years=2,
        )
    )
