"""tv_ledger REST endpoints.

GET /accounts/{public_key}/transactions   — cached list, newest first (<=200)
GET /transactions/{tx_id}                 — transaction + operations (cached)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.tv_common.database import get_db_session
from src.tv_common.response import ApiResponse, success_response
from src.tv_common.strkey import validate_public_key, validate_tx_hash
from src.tv_ledger.application.schemas import (
    TransactionDetailResponse,
    TransactionListResponse,
)
from src.tv_ledger.application.service import LIST_LIMIT, TransactionApplicationService

router = APIRouter(tags=["transactions"])

_service = TransactionApplicationService()


def get_transaction_service() -> TransactionApplicationService:
    return _service


@router.get("/accounts/{public_key}/transactions")
async def list_transactions(
    public_key: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    service: Annotated[TransactionApplicationService, Depends(get_transaction_service)],
    page: int | None = Query(None, ge=1, description="1-based page; omit for the full list"),
    page_size: int | None = Query(None, ge=1, le=LIST_LIMIT),
) -> ApiResponse:
    transactions = await service.list_transactions(db, validate_public_key(public_key))
    result = TransactionListResponse.build(transactions, page, page_size)
    return success_response(result, request)


@router.get("/transactions/{tx_id}")
async def get_transaction(
    tx_id: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    service: Annotated[TransactionApplicationService, Depends(get_transaction_service)],
) -> ApiResponse:
    detail = await service.get_transaction_detail(db, validate_tx_hash(tx_id))
    return success_response(TransactionDetailResponse.from_domain(detail), request)
