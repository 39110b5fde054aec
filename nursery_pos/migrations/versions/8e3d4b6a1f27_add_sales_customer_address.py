"""add_sales_customer_address

Revision ID: 8e3d4b6a1f27
Revises: 5c1f0a7e2b9d
Create Date: 2026-03-09 18:02:13.240117
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8e3d4b6a1f27'
down_revision: Union[str, Sequence[str], None] = '5c1f0a7e2b9d'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    columns = {col["name"] for col in sa.inspect(op.get_bind()).get_columns("sales")}

    if "customer_address" not in columns:
        op.add_column("sales", sa.Column("customer_address", sa.String(), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""

    with op.batch_alter_table("sales") as batch_op:
        batch_op.drop_column("customer_address")
