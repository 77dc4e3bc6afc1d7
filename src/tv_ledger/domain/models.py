"""Domain models for tv_ledger — pure dataclasses, no business logic.

Ledger history is append-only: once a Transaction or Operation is observed
its fields never change.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Transaction:
    id: str                      # transaction hash
    source_account: str
    ledger: int
    timestamp: datetime          # tz-aware UTC
    fee_charged: str             # stroops, decimal string
    successful: bool
    memo: str | None = None
    memo_type: str | None = None
    envelope_xdr: str | None = None
    result_xdr: str | None = None
    operation_count: int | None = None


@dataclass
class Operation:
    id: str
    transaction_id: str
    type: str
    position: int                # index in Horizon's response, preserves upstream order
    source_account: str | None = None
    from_account: str | None = None
    to_account: str | None = None
    amount: str | None = None
    asset: str | None = None


@dataclass
class TransactionDetail:
    """A transaction with its operations; operations may be empty for a partial cache row."""

    transaction: Transaction
    operations: list[Operation] = field(default_factory=list)
