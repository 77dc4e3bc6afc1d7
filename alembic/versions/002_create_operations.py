"""002: create operations table

Revision ID: 002
Revises: 001
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE operations (
            id                  VARCHAR(32)     PRIMARY KEY,
            transaction_id      VARCHAR(64)     NOT NULL
                REFERENCES transactions (id) ON DELETE CASCADE,
            type                VARCHAR(64)     NOT NULL,
            source_account      VARCHAR(56),
            from_account        VARCHAR(56),
            to_account          VARCHAR(56),
            amount              VARCHAR(32),
            asset               VARCHAR(32),
            position            INT             NOT NULL DEFAULT 0,
            CONSTRAINT ck_operations_position_gte_0 CHECK (position >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_operations_transaction_id ON operations (transaction_id);")
    op.execute("COMMENT ON TABLE operations IS 'Horizon operation cache — position = index in upstream response';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS operations CASCADE;")
