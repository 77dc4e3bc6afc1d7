"""003: create account_syncs table

Revision ID: 003
Revises: 002
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE account_syncs (
            account_id          VARCHAR(56)     PRIMARY KEY,
            synced_at           TIMESTAMPTZ     NOT NULL
        );
    """)
    op.execute("COMMENT ON TABLE account_syncs IS 'Last upstream fill of each account transaction list — drives list cache TTL';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS account_syncs;")
