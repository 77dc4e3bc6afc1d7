"""TransactionApplicationService — read-through cache over Horizon.

list_transactions(key):
  store hit (>=1 row, list not expired) -> cached rows, newest first
  miss -> Horizon account feed -> upsert-ignore batch + sync marker -> fresh rows
get_transaction_detail(id):
  store hit (tx row AND >=1 operation) -> cached detail
  miss -> Horizon tx + operations fetched concurrently -> upsert-ignore -> fresh detail
  either fetch fails -> partial cached row if one exists, else the upstream error

Store reads fail loudly (StoreError). Store writes during a cache fill are
rolled back and logged; the caller still gets the upstream data.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.tv_common.datetime_utils import utc_now
from src.tv_common.errors import (
    AccountNotFoundError,
    StoreError,
    TransactionNotFoundError,
    UpstreamError,
)
from src.tv_horizon.client import HorizonClient
from src.tv_horizon.payloads import HorizonOperation, HorizonTransaction
from src.tv_ledger.domain.models import Operation, Transaction, TransactionDetail
from src.tv_ledger.domain.repository import TransactionRepositoryProtocol
from src.tv_ledger.domain.transformer import to_operations, to_transaction
from src.tv_ledger.infrastructure.persistence import TransactionRepository

logger = logging.getLogger(__name__)

LIST_LIMIT = 200


class TransactionApplicationService:
    def __init__(
        self,
        repo: TransactionRepositoryProtocol | None = None,
        horizon: HorizonClient | None = None,
        list_ttl_seconds: int | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo: TransactionRepositoryProtocol = repo or TransactionRepository()
        self._horizon = horizon or HorizonClient()
        ttl = settings.TX_LIST_CACHE_TTL_SECONDS if list_ttl_seconds is None else list_ttl_seconds
        self._list_ttl = timedelta(seconds=ttl) if ttl > 0 else None
        self._clock = clock

    # ------------------------------------------------------------------
    # ListTransactions
    # ------------------------------------------------------------------

    async def list_transactions(
        self, db: AsyncSession, public_key: str
    ) -> list[Transaction]:
        try:
            cached = await self._repo.list_by_source_account(db, public_key, LIST_LIMIT)
            synced_at = (
                await self._repo.get_synced_at(db, public_key) if cached else None
            )
        except SQLAlchemyError as exc:
            raise StoreError("transaction list read failed") from exc

        if cached and self._is_fresh(synced_at):
            logger.debug("tx list cache hit: account=%s rows=%d", public_key, len(cached))
            return cached

        try:
            records = await self._horizon.list_account_transactions(public_key, LIST_LIMIT)
        except UpstreamError as exc:
            if cached:
                logger.warning(
                    "Serving expired tx list for %s, upstream failed: %s",
                    public_key,
                    exc.message,
                )
                return cached
            if exc.status_code == 404:
                raise AccountNotFoundError(public_key) from exc
            raise

        # The feed also carries txs this account only took part in; the store is
        # keyed by source_account, so only the account's own txs are kept
        fetched = [
            to_transaction(record) for record in records if record.source_account == public_key
        ]
        await self._fill_list_cache(db, public_key, fetched)
        logger.info("tx list cache fill: account=%s rows=%d", public_key, len(fetched))
        return fetched

    def _is_fresh(self, synced_at: datetime | None) -> bool:
        # No marker: rows predate sync tracking or came from the detail path
        if self._list_ttl is None or synced_at is None:
            return True
        return self._clock() - synced_at < self._list_ttl

    async def _fill_list_cache(
        self, db: AsyncSession, public_key: str, transactions: list[Transaction]
    ) -> None:
        try:
            await self._repo.insert_transactions_ignore(db, transactions)
            await self._repo.mark_synced(db, public_key, self._clock())
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            logger.warning(
                "tx list cache fill failed for %s, serving upstream data",
                public_key,
                exc_info=True,
            )

    # ------------------------------------------------------------------
    # GetTransactionDetail
    # ------------------------------------------------------------------

    async def get_transaction_detail(
        self, db: AsyncSession, tx_id: str
    ) -> TransactionDetail:
        try:
            cached = await self._repo.get_detail(db, tx_id)
        except SQLAlchemyError as exc:
            raise StoreError("transaction read failed") from exc

        # A row without operations is a prior partial write: refetch
        if cached is not None and cached.operations:
            logger.debug("tx detail cache hit: tx=%s ops=%d", tx_id, len(cached.operations))
            return cached

        try:
            tx_result, ops_result = await self._fetch_detail(tx_id)
        except UpstreamError as exc:
            if cached is not None:
                logger.warning(
                    "Serving partial cached tx %s, upstream failed: %s", tx_id, exc.message
                )
                return cached
            if exc.status_code == 404:
                raise TransactionNotFoundError(tx_id) from exc
            raise

        transaction = to_transaction(tx_result)
        operations = to_operations(transaction.id, ops_result)
        await self._fill_detail_cache(db, transaction, operations)
        logger.info("tx detail cache fill: tx=%s ops=%d", tx_id, len(operations))
        return TransactionDetail(transaction=transaction, operations=operations)

    async def _fetch_detail(
        self, tx_id: str
    ) -> tuple[HorizonTransaction, list[HorizonOperation]]:
        """Fetch tx and operations concurrently; the first failure cancels the other."""
        tx_task = asyncio.create_task(self._horizon.get_transaction(tx_id))
        ops_task = asyncio.create_task(self._horizon.list_transaction_operations(tx_id))
        tasks = (tx_task, ops_task)
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        # Transaction failure wins: a 404 there means the id is unknown
        for task in tasks:
            error = None if task.cancelled() else task.exception()
            if error is not None:
                raise error
        return tx_task.result(), ops_task.result()

    async def _fill_detail_cache(
        self, db: AsyncSession, transaction: Transaction, operations: list[Operation]
    ) -> None:
        try:
            await self._repo.insert_transactions_ignore(db, [transaction])
            await self._repo.insert_operations_ignore(db, operations)
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            logger.warning(
                "tx detail cache fill failed for %s, serving upstream data",
                transaction.id,
                exc_info=True,
            )
