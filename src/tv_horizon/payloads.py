"""Typed shapes for Horizon JSON payloads.

Only the fields the viewer reads are declared; Horizon's extra fields
(_links, paging_token, signatures, ...) are ignored. A missing required
field or a wrong type fails validation and the client reports it as an
UpstreamError.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _HorizonModel(BaseModel):
    # fee_charged / amount arrive as strings, but older Horizon builds sent ints
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, populate_by_name=True)


class HorizonBalance(_HorizonModel):
    asset_type: str
    balance: str
    asset_code: str | None = None
    asset_issuer: str | None = None


class HorizonAccount(_HorizonModel):
    id: str | None = None
    balances: list[HorizonBalance]


class HorizonTransaction(_HorizonModel):
    id: str
    source_account: str
    ledger: int
    created_at: datetime
    fee_charged: str
    successful: bool
    memo: str | None = None
    memo_type: str | None = None
    envelope_xdr: str | None = None
    result_xdr: str | None = None
    operation_count: int | None = None


class HorizonOperation(_HorizonModel):
    id: str
    type: str
    source_account: str | None = None
    from_account: str | None = Field(default=None, alias="from")
    to: str | None = None
    amount: str | None = None
    asset_type: str | None = None


# ---------------------------------------------------------------------------
# Collection pages: {"_embedded": {"records": [...]}}
# ---------------------------------------------------------------------------


class _TransactionRecords(_HorizonModel):
    records: list[HorizonTransaction]


class _OperationRecords(_HorizonModel):
    records: list[HorizonOperation]


class HorizonTransactionPage(_HorizonModel):
    embedded: _TransactionRecords = Field(alias="_embedded")


class HorizonOperationPage(_HorizonModel):
    embedded: _OperationRecords = Field(alias="_embedded")
