# tests/unit/test_ledger_schemas.py
"""Tests for tv_ledger response schemas (camelCase wire shape, paging)."""
from datetime import UTC, datetime

from src.tv_ledger.application.schemas import (
    DEFAULT_PAGE_SIZE,
    OperationOut,
    TransactionDetailResponse,
    TransactionListResponse,
    TransactionOut,
)
from src.tv_ledger.domain.models import Operation, Transaction, TransactionDetail


def _make_tx(n: int = 1, **kwargs) -> Transaction:
    return Transaction(
        id=kwargs.get("id", f"{n:064x}"),
        source_account=kwargs.get("source_account", "GSRC"),
        ledger=kwargs.get("ledger", 100 + n),
        timestamp=kwargs.get("timestamp", datetime(2024, 1, 2, 10, 0, tzinfo=UTC)),
        fee_charged=kwargs.get("fee_charged", "100"),
        successful=kwargs.get("successful", True),
        memo=kwargs.get("memo"),
        memo_type=kwargs.get("memo_type", "none"),
        envelope_xdr=kwargs.get("envelope_xdr", "AAAA"),
        result_xdr=kwargs.get("result_xdr", "BBBB"),
        operation_count=kwargs.get("operation_count", 1),
    )


class TestTransactionOut:
    def test_camel_case_keys(self) -> None:
        data = TransactionOut.from_domain(_make_tx()).model_dump(by_alias=True)
        assert set(data) == {
            "id", "sourceAccount", "ledger", "timestamp", "feeCharged", "feeDisplay",
            "successful", "memo", "memoType", "envelopeXdr", "resultXdr",
            "operationCount", "explorerUrl",
        }

    def test_timestamp_iso_utc(self) -> None:
        out = TransactionOut.from_domain(_make_tx())
        assert out.timestamp == "2024-01-02T10:00:00+00:00"

    def test_fee_display(self) -> None:
        assert TransactionOut.from_domain(_make_tx(fee_charged="100")).fee_display == "0.00001 XLM"
        assert TransactionOut.from_domain(_make_tx(fee_charged="oops")).fee_display == "oops"

    def test_explorer_url_points_at_tx(self) -> None:
        tx = _make_tx(7)
        out = TransactionOut.from_domain(tx)
        assert out.explorer_url.endswith(f"/tx/{tx.id}")
        assert out.explorer_url.startswith("https://")


class TestOperationOut:
    def test_from_and_to_keys(self) -> None:
        op = Operation(
            id="op-1", transaction_id="a" * 64, type="payment", position=0,
            source_account="GSRC", from_account="GSRC", to_account="GDST",
            amount="10.0000000", asset="native",
        )
        data = OperationOut.from_domain(op).model_dump(by_alias=True)
        assert data["from"] == "GSRC"
        assert data["to"] == "GDST"
        assert data["transactionId"] == "a" * 64
        assert data["sourceAccount"] == "GSRC"
        assert "position" not in data

    def test_absent_fields_are_null(self) -> None:
        op = Operation(id="op-2", transaction_id="a" * 64, type="create_account", position=0)
        data = OperationOut.from_domain(op).model_dump(by_alias=True)
        assert data["from"] is None
        assert data["amount"] is None


class TestTransactionListResponse:
    def test_unpaged_returns_everything(self) -> None:
        txs = [_make_tx(i) for i in range(25)]
        resp = TransactionListResponse.build(txs)
        assert len(resp.transactions) == 25
        assert resp.total == 25
        assert resp.page is None
        assert resp.total_pages is None

    def test_first_page_uses_default_size(self) -> None:
        txs = [_make_tx(i) for i in range(25)]
        resp = TransactionListResponse.build(txs, page=1)
        assert len(resp.transactions) == DEFAULT_PAGE_SIZE
        assert resp.page_size == DEFAULT_PAGE_SIZE
        assert resp.total_pages == 2

    def test_last_partial_page_keeps_order(self) -> None:
        txs = [_make_tx(i) for i in range(25)]
        resp = TransactionListResponse.build(txs, page=2, page_size=10)
        assert [t.id for t in resp.transactions] == [t.id for t in txs[10:20]]
        assert resp.total_pages == 3

    def test_page_past_end_is_empty(self) -> None:
        resp = TransactionListResponse.build([_make_tx(1)], page=5, page_size=10)
        assert resp.transactions == []
        assert resp.total == 1
        assert resp.total_pages == 1

    def test_empty_list(self) -> None:
        resp = TransactionListResponse.build([], page=1, page_size=10)
        assert resp.total == 0
        assert resp.total_pages == 0

    def test_paging_keys_camel_case(self) -> None:
        data = TransactionListResponse.build([_make_tx(1)], page=1, page_size=5).model_dump(
            by_alias=True
        )
        assert data["pageSize"] == 5
        assert data["totalPages"] == 1


class TestTransactionDetailResponse:
    def test_operations_in_order(self) -> None:
        tx = _make_tx(1)
        ops = [
            Operation(id=f"op-{i}", transaction_id=tx.id, type="payment", position=i)
            for i in range(3)
        ]
        resp = TransactionDetailResponse.from_domain(TransactionDetail(transaction=tx, operations=ops))
        assert resp.transaction.id == tx.id
        assert [op.id for op in resp.operations] == ["op-0", "op-1", "op-2"]
