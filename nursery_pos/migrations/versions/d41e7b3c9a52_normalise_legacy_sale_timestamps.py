"""normalise_legacy_sale_timestamps

Revision ID: d41e7b3c9a52
Revises: b72a9c05d4e1
Create Date: 2026-10-19 10:12:41.226905
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'd41e7b3c9a52'
down_revision: Union[str, Sequence[str], None] = 'b72a9c05d4e1'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    bind = op.get_bind()
    if bind.dialect.name != "sqlite":
        return

    # Rows written by CURRENT_TIMESTAMP are UTC without microseconds;
    # the app stores local time as YYYY-MM-DD HH:MM:SS.ffffff
    bind.execute(sa.text(
        "UPDATE sales "
        "SET created_at = datetime(created_at, 'localtime') || '.000000' "
        "WHERE length(created_at) = 19"
    ))


def downgrade() -> None:
    """Downgrade schema."""

    # Local times cannot be told apart from new rows once converted
    pass
