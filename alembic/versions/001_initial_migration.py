"""Initial migration - event ledger schema

Revision ID: 001_initial
Revises: 
Create Date: 2024-02-20

"""
from alembic import op
import sqlalchemy as sa

from src.models.db_types import ExactDecimal

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'sales_events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('invoice_id', sa.String(length=100), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('invoice_id')
    )
    op.create_index('ix_sales_events_date', 'sales_events', ['date'], unique=False)
    
    op.create_table(
        'sales_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('sale_id', sa.Integer(), nullable=False),
        sa.Column('item_id', sa.String(length=100), nullable=False),
        sa.Column('line_number', sa.Integer(), nullable=False),
        sa.Column('cost', ExactDecimal(18, 4), nullable=True),
        sa.Column('tax_rate', ExactDecimal(12, 6), nullable=True),
        sa.ForeignKeyConstraint(['sale_id'], ['sales_events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sale_id', 'item_id', name='uq_sales_items_sale_item')
    )
    op.create_index('ix_sales_items_sale_id', 'sales_items', ['sale_id', 'line_number'], unique=False)
    
    op.create_table(
        'amendments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('invoice_id', sa.String(length=100), nullable=False),
        sa.Column('item_id', sa.String(length=100), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('cost', ExactDecimal(18, 4), nullable=True),
        sa.Column('tax_rate', ExactDecimal(12, 6), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_amendments_identity', 'amendments', ['invoice_id', 'item_id'], unique=False)
    
    op.create_table(
        'tax_payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('amount', ExactDecimal(18, 4), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_tax_payments_date', 'tax_payments', ['date'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_tax_payments_date', table_name='tax_payments')
    op.drop_table('tax_payments')
    op.drop_index('ix_amendments_identity', table_name='amendments')
    op.drop_table('amendments')
    op.drop_index('ix_sales_items_sale_id', table_name='sales_items')
    op.drop_table('sales_items')
    op.drop_index('ix_sales_events_date', table_name='sales_events')
    op.drop_table('sales_events')
