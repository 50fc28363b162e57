"""Create products table

Revision ID: 3c1e9a7b2d40
Revises:
Create Date: 2026-10-19 09:12:41.318207

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1e9a7b2d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "products",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("price > 0", name="ck_products_price_positive"),
        sa.CheckConstraint("length(trim(name)) > 0", name="ck_products_name_not_blank"),
        sa.CheckConstraint(
            "length(trim(category)) > 0", name="ck_products_category_not_blank"
        ),
    )
    op.create_index("ix_products_category_price", "products", ["category", "price"])
    op.create_index("ix_products_created_at", "products", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_products_created_at", table_name="products")
    op.drop_index("ix_products_category_price", table_name="products")
    op.drop_table("products")
