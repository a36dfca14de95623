"""Customers, loans and payments tables

Revision ID: 3f9c2a7d1e40
Revises:
Create Date: 2026-10-16 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1e40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ============================================================
    # Customers Table
    # ============================================================
    op.create_table('customers',
        sa.Column('customer_id', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('customer_id')
    )
    op.create_index(op.f('ix_customers_customer_id'), 'customers', ['customer_id'], unique=False)

    # ============================================================
    # Loans Table
    # ============================================================
    op.create_table('loans',
        sa.Column('loan_id', sa.String(length=50), nullable=False),
        sa.Column('customer_id', sa.String(length=50), nullable=False),
        sa.Column('principal_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        # Exact decimals kept as text so the unrounded EMI survives storage
        sa.Column('interest_rate', sa.String(length=64), nullable=False),
        sa.Column('loan_period_years', sa.Integer(), nullable=False),
        sa.Column('total_interest', sa.String(length=64), nullable=False),
        sa.Column('total_amount', sa.String(length=64), nullable=False),
        sa.Column('monthly_emi', sa.String(length=64), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'PAID_OFF', name='loan_status'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.customer_id'], ),
        sa.PrimaryKeyConstraint('loan_id')
    )
    op.create_index(op.f('ix_loans_loan_id'), 'loans', ['loan_id'], unique=False)
    op.create_index(op.f('ix_loans_customer_id'), 'loans', ['customer_id'], unique=False)

    # ============================================================
    # Payments Table
    # ============================================================
    op.create_table('payments',
        sa.Column('payment_id', sa.String(length=50), nullable=False),
        sa.Column('loan_id', sa.String(length=50), nullable=False),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('payment_type', sa.Enum('EMI', 'LUMP_SUM', name='payment_type'), nullable=False),
        sa.Column('payment_date', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['loan_id'], ['loans.loan_id'], ),
        sa.PrimaryKeyConstraint('payment_id')
    )
    op.create_index(op.f('ix_payments_payment_id'), 'payments', ['payment_id'], unique=False)
    op.create_index(op.f('ix_payments_loan_id'), 'payments', ['loan_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_payments_loan_id'), table_name='payments')
    op.drop_index(op.f('ix_payments_payment_id'), table_name='payments')
    op.drop_table('payments')
    op.drop_index(op.f('ix_loans_customer_id'), table_name='loans')
    op.drop_index(op.f('ix_loans_loan_id'), table_name='loans')
    op.drop_table('loans')
    op.drop_index(op.f('ix_customers_customer_id'), table_name='customers')
    op.drop_table('customers')
    sa.Enum(name='payment_type').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='loan_status').drop(op.get_bind(), checkfirst=True)
