"""HorizonClient — async reader for the public Stellar ledger API.

Endpoints used:
  GET /accounts/{key}                                   account + balances
  GET /accounts/{key}/transactions?limit=&order=desc&include_failed=true
                                                        account feed
  GET /transactions/{id}                                single transaction
  GET /transactions/{id}/operations?limit=              operations of a tx

Retry policy: transport errors, timeouts, 429 and 5xx are retried up to
max_retries times with exponential backoff. Any other 4xx, an undecodable body
and a redirect loop fail at once.
Every failure surfaces as UpstreamError (status_code set when Horizon answered).
"""

import asyncio
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from config.settings import settings
from src.tv_common.errors import UpstreamError
from src.tv_common.http_client import get_http_client
from src.tv_horizon.payloads import (
    HorizonAccount,
    HorizonOperation,
    HorizonOperationPage,
    HorizonTransaction,
    HorizonTransactionPage,
)

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})

_PayloadT = TypeVar("_PayloadT", bound=BaseModel)


class HorizonClient:
    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        page_limit: int | None = None,
    ) -> None:
        # http=None -> shared pool from tv_common.http_client, resolved per call
        self._http = http
        self._max_retries = settings.HORIZON_MAX_RETRIES if max_retries is None else max_retries
        self._backoff = (
            settings.HORIZON_RETRY_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds
        )
        self.page_limit = settings.HORIZON_PAGE_LIMIT if page_limit is None else page_limit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_account(self, public_key: str) -> HorizonAccount:
        data = await self._get_json(f"/accounts/{public_key}")
        return self._parse(HorizonAccount, data, "account")

    async def list_account_transactions(
        self, public_key: str, limit: int | None = None
    ) -> list[HorizonTransaction]:
        data = await self._get_json(
            f"/accounts/{public_key}/transactions",
            {"limit": limit or self.page_limit, "order": "desc", "include_failed": "true"},
        )
        page = self._parse(HorizonTransactionPage, data, "transaction page")
        return page.embedded.records

    async def get_transaction(self, tx_id: str) -> HorizonTransaction:
        data = await self._get_json(f"/transactions/{tx_id}")
        return self._parse(HorizonTransaction, data, "transaction")

    async def list_transaction_operations(
        self, tx_id: str, limit: int | None = None
    ) -> list[HorizonOperation]:
        data = await self._get_json(
            f"/transactions/{tx_id}/operations",
            {"limit": limit or self.page_limit},
        )
        page = self._parse(HorizonOperationPage, data, "operation page")
        return page.embedded.records

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _client(self) -> httpx.AsyncClient:
        if self._http is not None:
            return self._http
        return await get_http_client()

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        client = await self._client()
        last_error: UpstreamError | None = None

        for attempt in range(self._max_retries + 1):
            try:
                response = await client.get(path, params=params)
            except httpx.TimeoutException:
                last_error = UpstreamError(f"timeout on GET {path}")
            except httpx.TransportError as exc:
                last_error = UpstreamError(f"{type(exc).__name__} on GET {path}")
            except httpx.RequestError as exc:
                # decoding and redirect failures: retrying would not help
                raise UpstreamError(f"{type(exc).__name__} on GET {path}") from exc
            else:
                if response.status_code in _RETRYABLE_STATUS:
                    last_error = UpstreamError(
                        f"HTTP {response.status_code} on GET {path}", response.status_code
                    )
                elif response.is_error:
                    raise UpstreamError(
                        f"HTTP {response.status_code} on GET {path}", response.status_code
                    )
                else:
                    try:
                        return response.json()
                    except ValueError as exc:
                        raise UpstreamError(f"invalid JSON from GET {path}") from exc

            if attempt < self._max_retries:
                delay = self._backoff * (2**attempt)
                logger.warning(
                    "Horizon retry %d/%d in %.2fs: %s",
                    attempt + 1,
                    self._max_retries,
                    delay,
                    last_error.message,
                )
                await asyncio.sleep(delay)

        assert last_error is not None
        logger.error("Horizon request failed: %s", last_error.message)
        raise last_error

    @staticmethod
    def _parse(model: type[_PayloadT], data: Any, what: str) -> _PayloadT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise UpstreamError(
                f"malformed {what} payload ({exc.error_count()} validation errors)"
            ) from exc
