"""Pydantic schemas for tv_account API responses.

Balance entries keep Horizon's own keys (asset_type, balance, ...) because the
viewer reads them verbatim; the envelope fields are camelCase.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.tv_account.domain.models import AccountSnapshot


class BalanceOut(BaseModel):
    asset_type: str
    balance: str
    asset_code: str | None = None
    asset_issuer: str | None = None


class AccountResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    account_id: str
    balances: list[BalanceOut]
    native_balance: str

    @classmethod
    def from_domain(cls, snapshot: AccountSnapshot) -> "AccountResponse":
        return cls(
            account_id=snapshot.account_id,
            balances=[
                BalanceOut(
                    asset_type=b.asset_type,
                    balance=b.balance,
                    asset_code=b.asset_code,
                    asset_issuer=b.asset_issuer,
                )
                for b in snapshot.balances
            ],
            native_balance=snapshot.native_balance,
        )
