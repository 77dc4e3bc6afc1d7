"""TransactionRepository — concrete implementation of TransactionRepositoryProtocol.

All queries use raw text() SQL (no ORM).
Ledger rows are written with INSERT ... ON CONFLICT (id) DO NOTHING: the first
write wins and repeats are no-ops, so concurrent cache fills for the same id
never conflict. Only account_syncs is ever updated in place.

Transaction ownership: the CALLER (application service) commits or rolls back.
"""

from datetime import datetime

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.tv_common.datetime_utils import as_utc
from src.tv_ledger.domain.models import Operation, Transaction, TransactionDetail

# ---------------------------------------------------------------------------
# SQL: transactions
# ---------------------------------------------------------------------------

_LIST_BY_SOURCE_SQL = text("""
    SELECT id, source_account, ledger, timestamp, fee_charged, successful,
           memo, memo_type, envelope_xdr, result_xdr, operation_count
    FROM transactions
    WHERE source_account = :source_account
    ORDER BY timestamp DESC, id DESC
    LIMIT :limit
""")

_GET_TX_SQL = text("""
    SELECT id, source_account, ledger, timestamp, fee_charged, successful,
           memo, memo_type, envelope_xdr, result_xdr, operation_count
    FROM transactions
    WHERE id = :tx_id
""")

_INSERT_TX_SQL = text("""
    INSERT INTO transactions
        (id, source_account, ledger, timestamp, fee_charged, successful,
         memo, memo_type, envelope_xdr, result_xdr, operation_count)
    VALUES
        (:id, :source_account, :ledger, :timestamp, :fee_charged, :successful,
         :memo, :memo_type, :envelope_xdr, :result_xdr, :operation_count)
    ON CONFLICT (id) DO NOTHING
""")

# ---------------------------------------------------------------------------
# SQL: operations
# ---------------------------------------------------------------------------

_LIST_OPS_SQL = text("""
    SELECT id, transaction_id, type, source_account, from_account, to_account,
           amount, asset, position
    FROM operations
    WHERE transaction_id = :tx_id
    ORDER BY position, id
""")

_INSERT_OP_SQL = text("""
    INSERT INTO operations
        (id, transaction_id, type, source_account, from_account, to_account,
         amount, asset, position)
    VALUES
        (:id, :transaction_id, :type, :source_account, :from_account, :to_account,
         :amount, :asset, :position)
    ON CONFLICT (id) DO NOTHING
""")

# ---------------------------------------------------------------------------
# SQL: account sync markers
# ---------------------------------------------------------------------------

_GET_SYNC_SQL = text("""
    SELECT synced_at FROM account_syncs WHERE account_id = :account_id
""")

_UPSERT_SYNC_SQL = text("""
    INSERT INTO account_syncs (account_id, synced_at)
    VALUES (:account_id, :synced_at)
    ON CONFLICT (account_id) DO UPDATE
        SET synced_at = EXCLUDED.synced_at
""")

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

def _row_to_transaction(row: object) -> Transaction:
    return Transaction(
        id=row.id,  # type: ignore[attr-defined]
        source_account=row.source_account,  # type: ignore[attr-defined]
        ledger=row.ledger,  # type: ignore[attr-defined]
        timestamp=as_utc(row.timestamp),  # type: ignore[attr-defined]
        fee_charged=row.fee_charged,  # type: ignore[attr-defined]
        successful=bool(row.successful),  # type: ignore[attr-defined]
        memo=row.memo,  # type: ignore[attr-defined]
        memo_type=row.memo_type,  # type: ignore[attr-defined]
        envelope_xdr=row.envelope_xdr,  # type: ignore[attr-defined]
        result_xdr=row.result_xdr,  # type: ignore[attr-defined]
        operation_count=row.operation_count,  # type: ignore[attr-defined]
    )


def _row_to_operation(row: object) -> Operation:
    return Operation(
        id=row.id,  # type: ignore[attr-defined]
        transaction_id=row.transaction_id,  # type: ignore[attr-defined]
        type=row.type,  # type: ignore[attr-defined]
        position=row.position,  # type: ignore[attr-defined]
        source_account=row.source_account,  # type: ignore[attr-defined]
        from_account=row.from_account,  # type: ignore[attr-defined]
        to_account=row.to_account,  # type: ignore[attr-defined]
        amount=row.amount,  # type: ignore[attr-defined]
        asset=row.asset,  # type: ignore[attr-defined]
    )


def _transaction_params(tx: Transaction) -> dict[str, object]:
    return {
        "id": tx.id,
        "source_account": tx.source_account,
        "ledger": tx.ledger,
        "timestamp": tx.timestamp,
        "fee_charged": tx.fee_charged,
        "successful": tx.successful,
        "memo": tx.memo,
        "memo_type": tx.memo_type,
        "envelope_xdr": tx.envelope_xdr,
        "result_xdr": tx.result_xdr,
        "operation_count": tx.operation_count,
    }


def _operation_params(op: Operation) -> dict[str, object]:
    return {
        "id": op.id,
        "transaction_id": op.transaction_id,
        "type": op.type,
        "source_account": op.source_account,
        "from_account": op.from_account,
        "to_account": op.to_account,
        "amount": op.amount,
        "asset": op.asset,
        "position": op.position,
    }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class TransactionRepository:
    async def list_by_source_account(
        self, db: AsyncSession, source_account: str, limit: int
    ) -> list[Transaction]:
        result = await db.execute(
            _LIST_BY_SOURCE_SQL, {"source_account": source_account, "limit": limit}
        )
        return [_row_to_transaction(row) for row in result.fetchall()]

    async def get_detail(
        self, db: AsyncSession, tx_id: str
    ) -> TransactionDetail | None:
        tx_result = await db.execute(_GET_TX_SQL, {"tx_id": tx_id})
        tx_row = tx_result.fetchone()
        if tx_row is None:
            return None

        ops_result = await db.execute(_LIST_OPS_SQL, {"tx_id": tx_id})
        operations = [_row_to_operation(row) for row in ops_result.fetchall()]
        return TransactionDetail(
            transaction=_row_to_transaction(tx_row),
            operations=operations,
        )

    async def insert_transactions_ignore(
        self, db: AsyncSession, transactions: list[Transaction]
    ) -> None:
        if not transactions:
            return
        # executemany: one round-trip batch
        await db.execute(_INSERT_TX_SQL, [_transaction_params(tx) for tx in transactions])

    async def insert_operations_ignore(
        self, db: AsyncSession, operations: list[Operation]
    ) -> None:
        if not operations:
            return
        await db.execute(_INSERT_OP_SQL, [_operation_params(op) for op in operations])

    async def get_synced_at(
        self, db: AsyncSession, account_id: str
    ) -> datetime | None:
        result = await db.execute(_GET_SYNC_SQL, {"account_id": account_id})
        row = result.fetchone()
        return as_utc(row.synced_at) if row else None

    async def mark_synced(
        self, db: AsyncSession, account_id: str, synced_at: datetime
    ) -> None:
        await db.execute(
            _UPSERT_SYNC_SQL, {"account_id": account_id, "synced_at": synced_at}
        )
