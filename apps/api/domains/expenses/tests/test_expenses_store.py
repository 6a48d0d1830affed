"""Tests for expense storage and the expenses listing endpoint."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.core.errors import register_error_handlers
from apps.api.deps import get_expense_store
from apps.api.domains.expenses.repository import InMemoryExpenseStore, SupabaseExpenseStore
from apps.api.domains.expenses.router import router
from apps.api.domains.expenses.schemas import TransactionRecord

NOW = datetime(2026, 5, 12, 9, 30, tzinfo=timezone.utc)


def _record(user="9876543210", merchant="ZOMATO", minutes=0, **kwargs):
    return TransactionRecord(
        user_id=user,
        amount=kwargs.pop("amount", 100.0),
        merchant=merchant,
        category=kwargs.pop("category", "Food"),
        source_app="VM-HDFCBK",
        timestamp=NOW + timedelta(minutes=minutes),
        **kwargs,
    )


class TestTransactionRecord:
    def test_document_uses_stored_field_names(self):
        doc = _record(original_message="Rs 100 debited to ZOMATO").to_document()

        assert doc == {
            "userPhone": "9876543210",
            "amount": 100.0,
            "merchant": "ZOMATO",
            "category": "Food",
            "appName": "VM-HDFCBK",
            "originalMessage": "Rs 100 debited to ZOMATO",
            "date": "2026-05-12T09:30:00Z",
        }

    def test_accepts_stored_field_names(self):
        record = TransactionRecord.model_validate(
            {
                "userPhone": "1",
                "amount": 5,
                "merchant": "KFC",
                "category": "Food",
                "appName": "AD-ICICI",
                "date": "2026-05-12T09:30:00+00:00",
                "id": 42,
            }
        )
        assert record.user_id == "1"
        assert record.source_app == "AD-ICICI"
        assert record.original_message is None

    def test_timestamp_defaults_to_now(self):
        record = TransactionRecord(user_id="1", amount=1.0, merchant="X", category="General")
        assert record.timestamp.tzinfo is not None

    def test_zero_amount_is_rejected(self):
        with pytest.raises(ValueError):
            TransactionRecord(user_id="1", amount=0, merchant="X", category="General")


class TestInMemoryStore:
    def test_lists_only_that_user_newest_first(self):
        store = InMemoryExpenseStore()
        store.add(_record(merchant="OLD", minutes=0))
        store.add(_record(merchant="NEW", minutes=5))
        store.add(_record(user="1111111111", merchant="OTHER"))

        records = store.list_for_user("9876543210")

        assert [r.merchant for r in records] == ["NEW", "OLD"]
        assert len(store) == 3

    def test_unknown_user_has_no_expenses(self):
        assert InMemoryExpenseStore().list_for_user("0") == []


class TestSupabaseStore:
    def test_add_inserts_document(self):
        client = MagicMock()
        store = SupabaseExpenseStore(client, table="expenses")

        store.add(_record())

        client.table.assert_called_with("expenses")
        inserted = client.table.return_value.insert.call_args[0][0]
        assert inserted["userPhone"] == "9876543210"
        assert inserted["merchant"] == "ZOMATO"

    def test_list_queries_by_user_newest_first(self):
        client = MagicMock()
        query = client.table.return_value.select.return_value.eq.return_value.order.return_value
        query.execute.return_value = MagicMock(data=[_record().to_document()])
        store = SupabaseExpenseStore(client, table="expenses")

        records = store.list_for_user("9876543210")

        client.table.return_value.select.return_value.eq.assert_called_with(
            "userPhone", "9876543210"
        )
        client.table.return_value.select.return_value.eq.return_value.order.assert_called_with(
            "date", desc=True
        )
        assert records[0].merchant == "ZOMATO"


@pytest.fixture
def store():
    store = InMemoryExpenseStore()
    store.add(_record(merchant="ZOMATO", minutes=1))
    store.add(_record(merchant="UBER", category="Travel", minutes=2))
    return store


@pytest.fixture
def client(store):
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[get_expense_store] = lambda: store
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()


class TestExpensesEndpoint:
    def test_returns_user_expenses(self, client):
        response = client.get("/api/v1/expenses", params={"phone": "9876543210"})

        assert response.status_code == 200
        data = response.json()
        assert [e["merchant"] for e in data] == ["UBER", "ZOMATO"]
        assert data[0]["userPhone"] == "9876543210"
        assert "date" in data[0]

    def test_phone_is_required(self, client):
        response = client.get("/api/v1/expenses")

        assert response.status_code == 422
        assert response.json()["title"] == "Unprocessable Entity"

    def test_store_failure_returns_503(self):
        broken = MagicMock()
        broken.list_for_user.side_effect = RuntimeError("timeout")
        app = FastAPI()
        register_error_handlers(app)
        app.include_router(router, prefix="/api/v1")
        app.dependency_overrides[get_expense_store] = lambda: broken

        response = TestClient(app).get("/api/v1/expenses", params={"phone": "1"})

        assert response.status_code == 503
