"""add_sales_manual_override

Revision ID: b72a9c05d4e1
Revises: 8e3d4b6a1f27
Create Date: 2026-04-14 09:37:55.804391
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b72a9c05d4e1'
down_revision: Union[str, Sequence[str], None] = '8e3d4b6a1f27'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    columns = {col["name"] for col in sa.inspect(op.get_bind()).get_columns("sales")}

    if "manual_override" not in columns:
        op.add_column(
            "sales",
            sa.Column(
                "manual_override",
                sa.Boolean(),
                nullable=False,
                server_default=sa.false(),
            ),
        )


def downgrade() -> None:
    """Downgrade schema."""

    with op.batch_alter_table("sales") as batch_op:
        batch_op.drop_column("manual_override")
