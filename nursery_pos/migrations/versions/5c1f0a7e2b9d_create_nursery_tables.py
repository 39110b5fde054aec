"""create_nursery_tables

Revision ID: 5c1f0a7e2b9d
Revises:
Create Date: 2026-03-02 10:14:41.512032
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1f0a7e2b9d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    existing = set(sa.inspect(op.get_bind()).get_table_names())

    # PRODUCTS
    if "products" not in existing:
        op.create_table(
            "products",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("name", sa.String(), nullable=False),
            sa.Column("price", sa.Numeric(10, 2), nullable=False),
            sa.Column("category", sa.String(), nullable=True),
            sa.CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        )
        op.create_index("ix_products_id", "products", ["id"])
        op.create_index("ix_products_name", "products", ["name"])

    # SETTINGS
    if "settings" not in existing:
        op.create_table(
            "settings",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("shop_name", sa.String(), nullable=False),
            sa.Column("address", sa.String(), nullable=True),
            sa.Column("phone", sa.String(), nullable=True),
            sa.Column("email", sa.String(), nullable=True),
            sa.Column("gst_number", sa.String(), nullable=True),
            sa.CheckConstraint("id = 1", name="ck_settings_singleton"),
        )

    # SALES
    if "sales" not in existing:
        op.create_table(
            "sales",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("customer_name", sa.String(), nullable=True),
            sa.Column("customer_phone", sa.String(), nullable=True),
            sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
            sa.Column("discount", sa.Numeric(10, 2), nullable=False),
            sa.Column("final_amount", sa.Numeric(10, 2), nullable=False),
            sa.Column("items", sa.Text(), nullable=False),
            sa.Column(
                "created_at",
                sa.DateTime(),
                server_default=sa.func.now(),
                nullable=False,
            ),
        )
        op.create_index("ix_sales_id", "sales", ["id"])
        op.create_index("ix_sales_created_at", "sales", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_sales_created_at", table_name="sales")
    op.drop_index("ix_sales_id", table_name="sales")
    op.drop_table("sales")
    op.drop_table("settings")
    op.drop_index("ix_products_name", table_name="products")
    op.drop_index("ix_products_id", table_name="products")
    op.drop_table("products")
