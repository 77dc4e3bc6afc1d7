"""Repository Protocol — dependency inversion for testability.

Unit tests inject an in-memory fake or a mock conforming to this Protocol.
Infrastructure layer provides the real implementation.

Write methods never overwrite: a row whose primary key already exists is
silently skipped. Callers own commit/rollback.
"""

from datetime import datetime
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.tv_ledger.domain.models import Operation, Transaction, TransactionDetail


class TransactionRepositoryProtocol(Protocol):
    async def list_by_source_account(
        self, db: AsyncSession, source_account: str, limit: int
    ) -> list[Transaction]: ...

    async def get_detail(
        self, db: AsyncSession, tx_id: str
    ) -> TransactionDetail | None: ...

    async def insert_transactions_ignore(
        self, db: AsyncSession, transactions: list[Transaction]
    ) -> None: ...

    async def insert_operations_ignore(
        self, db: AsyncSession, operations: list[Operation]
    ) -> None: ...

    async def get_synced_at(
        self, db: AsyncSession, account_id: str
    ) -> datetime | None: ...

    async def mark_synced(
        self, db: AsyncSession, account_id: str, synced_at: datetime
    ) -> None: ...
