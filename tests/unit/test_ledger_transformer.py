# tests/unit/test_ledger_transformer.py
"""Tests for Horizon payload -> domain mapping."""
from datetime import UTC, datetime

from src.tv_horizon.payloads import HorizonOperation, HorizonTransaction
from src.tv_ledger.domain.transformer import to_operations, to_transaction
from tests.fakes import ACCOUNT, OTHER_ACCOUNT, horizon_op, horizon_tx, tx_hash


class TestToTransaction:
    def test_maps_every_field(self) -> None:
        payload = HorizonTransaction.model_validate(
            horizon_tx(3, memo="rent", memo_type="text", fee_charged="200", successful=False)
        )

        tx = to_transaction(payload)

        assert tx.id == tx_hash(3)
        assert tx.source_account == ACCOUNT
        assert tx.ledger == 50000003
        assert tx.timestamp == datetime(2024, 1, 4, 10, 0, tzinfo=UTC)
        assert tx.fee_charged == "200"
        assert tx.successful is False
        assert tx.memo == "rent"
        assert tx.memo_type == "text"
        assert tx.envelope_xdr == payload.envelope_xdr
        assert tx.result_xdr == payload.result_xdr
        assert tx.operation_count == 1

    def test_offset_created_at_normalized_to_utc(self) -> None:
        payload = HorizonTransaction.model_validate(
            horizon_tx(1, created_at="2024-01-02T12:00:00+02:00")
        )

        tx = to_transaction(payload)

        assert tx.timestamp == datetime(2024, 1, 2, 10, 0, tzinfo=UTC)
        assert tx.timestamp.utcoffset().total_seconds() == 0

    def test_nul_bytes_dropped_from_memo(self) -> None:
        payload = HorizonTransaction.model_validate(
            horizon_tx(1, memo="pay\u0000ment", memo_type="text")
        )

        assert to_transaction(payload).memo == "payment"

    def test_optional_fields_absent(self) -> None:
        raw = horizon_tx(1)
        for key in ("memo", "memo_type", "envelope_xdr", "result_xdr", "operation_count"):
            raw.pop(key)

        tx = to_transaction(HorizonTransaction.model_validate(raw))

        assert tx.memo is None
        assert tx.operation_count is None


class TestToOperations:
    def test_positions_follow_response_order(self) -> None:
        ops = [HorizonOperation.model_validate(horizon_op(str(i))) for i in (30, 10, 20)]

        mapped = to_operations(tx_hash(1), ops)

        assert [(op.id, op.position) for op in mapped] == [("30", 0), ("10", 1), ("20", 2)]
        assert all(op.transaction_id == tx_hash(1) for op in mapped)

    def test_payment_fields(self) -> None:
        op = to_operations(tx_hash(1), [HorizonOperation.model_validate(horizon_op("1"))])[0]

        assert op.type == "payment"
        assert op.from_account == ACCOUNT
        assert op.to_account == OTHER_ACCOUNT
        assert op.amount == "10.0000000"
        assert op.asset == "native"

    def test_empty(self) -> None:
        assert to_operations(tx_hash(1), []) == []
