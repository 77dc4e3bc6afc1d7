"""001: create transactions table

Revision ID: 001
Revises: 
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE transactions (
            id                  VARCHAR(64)     PRIMARY KEY,
            source_account      VARCHAR(56)     NOT NULL,
            ledger              BIGINT          NOT NULL,
            timestamp           TIMESTAMPTZ     NOT NULL,
            fee_charged         VARCHAR(32)     NOT NULL,
            successful          BOOLEAN         NOT NULL,
            memo                TEXT,
            memo_type           VARCHAR(16),
            envelope_xdr        TEXT,
            result_xdr          TEXT,
            operation_count     INT,
            CONSTRAINT ck_transactions_ledger_gte_0 CHECK (ledger >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_transactions_source_account ON transactions (source_account);")
    op.execute("CREATE INDEX idx_transactions_timestamp ON transactions (timestamp);")
    op.execute("COMMENT ON TABLE transactions IS 'Horizon transaction cache — append-only, rows never updated';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS transactions CASCADE;")
