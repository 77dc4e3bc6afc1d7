"""Horizon payload -> domain mapping.

Every field is mapped by name; nothing is copied wholesale:
  source_account -> source_account      created_at  -> timestamp (aware UTC)
  fee_charged    -> fee_charged         memo_type   -> memo_type
  envelope_xdr   -> envelope_xdr        result_xdr  -> result_xdr
  from           -> from_account        to          -> to_account
  asset_type     -> asset               memo        -> memo (NUL bytes dropped)
"""

from src.tv_common.datetime_utils import as_utc
from src.tv_horizon.payloads import HorizonOperation, HorizonTransaction
from src.tv_ledger.domain.models import Operation, Transaction


def _strip_nul(value: str | None) -> str | None:
    # Postgres TEXT rejects \x00; Horizon passes raw memo bytes through
    return value.replace("\x00", "") if value else value


def to_transaction(tx: HorizonTransaction) -> Transaction:
    return Transaction(
        id=tx.id,
        source_account=tx.source_account,
        ledger=tx.ledger,
        timestamp=as_utc(tx.created_at),
        fee_charged=tx.fee_charged,
        successful=tx.successful,
        memo=_strip_nul(tx.memo),
        memo_type=tx.memo_type,
        envelope_xdr=tx.envelope_xdr,
        result_xdr=tx.result_xdr,
        operation_count=tx.operation_count,
    )


def to_operations(tx_id: str, ops: list[HorizonOperation]) -> list[Operation]:
    """Map a Horizon operation page; position follows response order."""
    return [
        Operation(
            id=op.id,
            transaction_id=tx_id,
            type=op.type,
            position=i,
            source_account=op.source_account,
            from_account=op.from_account,
            to_account=op.to,
            amount=op.amount,
            asset=op.asset_type,
        )
        for i, op in enumerate(ops)
    ]
