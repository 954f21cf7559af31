"""create items table

Revision ID: 5b1e0c2f7a91
Revises:
Create Date: 2026-10-19 10:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c2f7a91'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def upgrade() -> None:
    """Upgrade schema: create items table."""
    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('amount', sa.Numeric(15, 2), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("type IN ('income', 'expense')", name='ck_items_type'),
        sa.CheckConstraint('amount >= 0', name='ck_items_amount_non_negative'),
    )
    op.create_index('ix_items_date', 'items', ['date'])

def downgrade() -> None:
    """Downgrade schema: drop items table."""
    op.drop_index('ix_items_date', table_name='items')
    op.drop_table('items')
