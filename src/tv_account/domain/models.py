"""Domain models for tv_account — live balances, never persisted."""

from dataclasses import dataclass, field

NATIVE_ASSET_TYPE = "native"


@dataclass
class Balance:
    asset_type: str
    balance: str
    asset_code: str | None = None
    asset_issuer: str | None = None


@dataclass
class AccountSnapshot:
    account_id: str
    balances: list[Balance] = field(default_factory=list)

    @property
    def native_balance(self) -> str:
        """XLM balance as Horizon reports it; '0' when the account holds none."""
        for b in self.balances:
            if b.asset_type == NATIVE_ASSET_TYPE:
                return b.balance
        return "0"
