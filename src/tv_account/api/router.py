"""tv_account REST endpoints.

GET /accounts/{public_key}    — live balances (never cached)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.tv_account.application.schemas import AccountResponse
from src.tv_account.application.service import AccountApplicationService
from src.tv_common.response import ApiResponse, success_response
from src.tv_common.strkey import validate_public_key

router = APIRouter(prefix="/accounts", tags=["accounts"])

_service = AccountApplicationService()


def get_account_service() -> AccountApplicationService:
    return _service


@router.get("/{public_key}")
async def get_account(
    public_key: str,
    request: Request,
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
) -> ApiResponse:
    snapshot = await service.get_account(validate_public_key(public_key))
    return success_response(AccountResponse.from_domain(snapshot), request)
