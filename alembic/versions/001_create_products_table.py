"""Create products table

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('title', sa.String(256), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(128), nullable=False),
        sa.Column('image', sa.String(512), nullable=True),
        sa.Column('sold', sa.Boolean(), nullable=False),
        sa.Column('dateOfSale', sa.Date(), nullable=False),
        sa.Column('sale_month', sa.String(2), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_products_category'), 'products', ['category'], unique=False)
    op.create_index(op.f('ix_products_sale_month'), 'products', ['sale_month'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_products_sale_month'), table_name='products')
    op.drop_index(op.f('ix_products_category'), table_name='products')
    op.drop_table('products')
