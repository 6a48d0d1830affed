"""Expense storage.

The API only needs two operations, add and list-by-user. ``SupabaseExpenseStore``
is used when Supabase credentials are configured; otherwise records live in
process memory (local development and tests).
"""

import threading
from typing import List, Protocol

from supabase import Client

from apps.api.domains.expenses.schemas import TransactionRecord


class ExpenseStore(Protocol):
    def add(self, record: TransactionRecord) -> TransactionRecord: ...

    def list_for_user(self, user_id: str) -> List[TransactionRecord]: ...


class InMemoryExpenseStore:
    """Thread-safe list-backed store."""

    def __init__(self):
        self._records: List[TransactionRecord] = []
        self._lock = threading.Lock()

    def add(self, record: TransactionRecord) -> TransactionRecord:
        with self._lock:
            self._records.append(record)
        return record

    def list_for_user(self, user_id: str) -> List[TransactionRecord]:
        with self._lock:
            records = [r for r in self._records if r.user_id == user_id]
        return sorted(records, key=lambda r: r.timestamp, reverse=True)

    def __len__(self) -> int:
        return len(self._records)


class SupabaseExpenseStore:
    """Stores expenses in a Supabase (PostgREST) table."""

    def __init__(self, client: Client, table: str = "expenses"):
        self.client = client
        self.table = table

    def add(self, record: TransactionRecord) -> TransactionRecord:
        self.client.table(self.table).insert(record.to_document()).execute()
        return record

    def list_for_user(self, user_id: str) -> List[TransactionRecord]:
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("userPhone", user_id)
            .order("date", desc=True)
            .execute()
        )
        return [TransactionRecord.model_validate(row) for row in response.data or []]
