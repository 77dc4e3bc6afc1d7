"""Pydantic schemas for tv_ledger API responses.

Serialized with camelCase keys (sourceAccount, feeCharged, memoType,
envelopeXdr, resultXdr, ...) — the contract the viewer front-end reads.
Operation from/to keep Horizon's short names on the wire.

Paging mirrors the viewer's client-side paging: the full cached list (<=200)
is sliced into pages of page_size, 1-based.
"""

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from config.settings import settings
from src.tv_common.stroops import fee_to_display
from src.tv_ledger.domain.models import Operation, Transaction, TransactionDetail

DEFAULT_PAGE_SIZE = 20


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


class TransactionOut(_CamelModel):
    id: str
    source_account: str
    ledger: int
    timestamp: str  # ISO8601
    fee_charged: str
    fee_display: str
    successful: bool
    memo: str | None
    memo_type: str | None
    envelope_xdr: str | None
    result_xdr: str | None
    operation_count: int | None
    explorer_url: str

    @classmethod
    def from_domain(cls, tx: Transaction) -> "TransactionOut":
        return cls(
            id=tx.id,
            source_account=tx.source_account,
            ledger=tx.ledger,
            timestamp=tx.timestamp.isoformat(),
            fee_charged=tx.fee_charged,
            fee_display=fee_to_display(tx.fee_charged),
            successful=tx.successful,
            memo=tx.memo,
            memo_type=tx.memo_type,
            envelope_xdr=tx.envelope_xdr,
            result_xdr=tx.result_xdr,
            operation_count=tx.operation_count,
            explorer_url=f"{settings.EXPLORER_URL.rstrip('/')}/tx/{tx.id}",
        )


class OperationOut(_CamelModel):
    id: str
    transaction_id: str
    type: str
    source_account: str | None
    from_account: str | None = Field(alias="from")
    to_account: str | None = Field(alias="to")
    amount: str | None
    asset: str | None

    @classmethod
    def from_domain(cls, op: Operation) -> "OperationOut":
        return cls(
            id=op.id,
            transaction_id=op.transaction_id,
            type=op.type,
            source_account=op.source_account,
            from_account=op.from_account,
            to_account=op.to_account,
            amount=op.amount,
            asset=op.asset,
        )


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TransactionListResponse(_CamelModel):
    transactions: list[TransactionOut]
    total: int
    page: int | None = None
    page_size: int | None = None
    total_pages: int | None = None

    @classmethod
    def build(
        cls,
        transactions: list[Transaction],
        page: int | None = None,
        page_size: int | None = None,
    ) -> "TransactionListResponse":
        total = len(transactions)
        if page is None and page_size is None:
            return cls(
                transactions=[TransactionOut.from_domain(t) for t in transactions],
                total=total,
            )

        page = page or 1
        size = page_size or DEFAULT_PAGE_SIZE
        start = (page - 1) * size
        window = transactions[start:start + size]
        return cls(
            transactions=[TransactionOut.from_domain(t) for t in window],
            total=total,
            page=page,
            page_size=size,
            total_pages=math.ceil(total / size),
        )


class TransactionDetailResponse(_CamelModel):
    transaction: TransactionOut
    operations: list[OperationOut]

    @classmethod
    def from_domain(cls, detail: TransactionDetail) -> "TransactionDetailResponse":
        return cls(
            transaction=TransactionOut.from_domain(detail.transaction),
            operations=[OperationOut.from_domain(op) for op in detail.operations],
        )
