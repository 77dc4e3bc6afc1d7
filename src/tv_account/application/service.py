"""AccountApplicationService — live account lookup, no store involvement.

Balances change with every ledger close, so they are always fetched from
Horizon and never cached.
"""

from src.tv_account.domain.models import AccountSnapshot, Balance
from src.tv_common.errors import AccountNotFoundError, UpstreamError
from src.tv_horizon.client import HorizonClient


class AccountApplicationService:
    def __init__(self, horizon: HorizonClient | None = None) -> None:
        self._horizon = horizon or HorizonClient()

    async def get_account(self, public_key: str) -> AccountSnapshot:
        try:
            account = await self._horizon.get_account(public_key)
        except UpstreamError as exc:
            if exc.status_code == 404:
                raise AccountNotFoundError(public_key) from exc
            raise

        return AccountSnapshot(
            account_id=account.id or public_key,
            balances=[
                Balance(
                    asset_type=b.asset_type,
                    balance=b.balance,
                    asset_code=b.asset_code,
                    asset_issuer=b.asset_issuer,
                )
                for b in account.balances
            ],
        )
