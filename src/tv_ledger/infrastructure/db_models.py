"""SQLAlchemy ORM models for the ledger cache tables.

DDL reference — persistence.py uses raw text() SQL. Alembic migrations
(001-003) are the authoritative DDL source; the DB-backed tests build a
scratch schema from this metadata.
"""

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.tv_common.database import Base


class TransactionORM(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("idx_transactions_source_account", "source_account"),
        Index("idx_transactions_timestamp", "timestamp"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    source_account: Mapped[str] = mapped_column(String(56), nullable=False)
    ledger: Mapped[int] = mapped_column(BigInteger, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    fee_charged: Mapped[str] = mapped_column(String(32), nullable=False)
    successful: Mapped[bool] = mapped_column(Boolean, nullable=False)
    memo: Mapped[str | None] = mapped_column(Text)
    memo_type: Mapped[str | None] = mapped_column(String(16))
    envelope_xdr: Mapped[str | None] = mapped_column(Text)
    result_xdr: Mapped[str | None] = mapped_column(Text)
    operation_count: Mapped[int | None] = mapped_column(Integer)


class OperationORM(Base):
    __tablename__ = "operations"
    __table_args__ = (Index("idx_operations_transaction_id", "transaction_id"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    transaction_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    source_account: Mapped[str | None] = mapped_column(String(56))
    from_account: Mapped[str | None] = mapped_column(String(56))
    to_account: Mapped[str | None] = mapped_column(String(56))
    amount: Mapped[str | None] = mapped_column(String(32))
    asset: Mapped[str | None] = mapped_column(String(32))
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class AccountSyncORM(Base):
    __tablename__ = "account_syncs"

    account_id: Mapped[str] = mapped_column(String(56), primary_key=True)
    synced_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
