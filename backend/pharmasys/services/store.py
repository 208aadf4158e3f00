from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

R = TypeVar('R')


class RecordStore(Generic[R]):
    """Process-local ordered list of records for one dashboard page.

    Every write swaps in a new list, so a list handed out by ``all()`` is never
    changed afterwards. Transaction-like stores are ``newest_first``: new
    records are prepended instead of appended.
    """

    def __init__(self, prefix: str = '', records: Iterable[R] = (), newest_first: bool = False, width: int = 3):
        self.prefix = prefix
        self.newest_first = newest_first
        self.width = width
        self._records: List[R] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[R]:
        return self._records

    def get(self, record_id: str) -> Optional[R]:
        return next((r for r in self._records if r.id == record_id), None)

    def next_id(self) -> str:
        taken = {r.id for r in self._records}
        n = len(self._records) + 1
        while self._format_id(n) in taken:
            n += 1
        return self._format_id(n)

    def _format_id(self, n: int) -> str:
        if not self.prefix:
            return str(n)
        return f"{self.prefix}-{n:0{self.width}d}"

    def add(self, record: R) -> R:
        if self.newest_first:
            self._records = [record] + self._records
        else:
            self._records = self._records + [record]
        return record

    def replace(self, record_id: str, record: R) -> R:
        self._records = [record if r.id == record_id else r for r in self._records]
        return record

    def update(self, record_id: str, change: Callable[[R], R]) -> Optional[R]:
        current = self.get(record_id)
        if current is None:
            return None
        return self.replace(record_id, change(current))

    def remove(self, record_id: str) -> bool:
        kept = [r for r in self._records if r.id != record_id]
        removed = len(kept) != len(self._records)
        self._records = kept
        return removed


class Stores:
    """All page stores of one application instance."""

    def __init__(self, **seed: Iterable[Any]):
        self.medicines = RecordStore('MED', seed.get('medicines', ()))
        self.suppliers = RecordStore('SUP', seed.get('suppliers', ()))
        self.purchases = RecordStore('PO', seed.get('purchases', ()), newest_first=True)
        self.pharmacies = RecordStore('PHR', seed.get('pharmacies', ()))
        self.sales = RecordStore('INV', seed.get('sales', ()), newest_first=True)
        self.sales_returns = RecordStore('RET', seed.get('sales_returns', ()), newest_first=True)
        self.payments = RecordStore('PAY', seed.get('payments', ()), newest_first=True)
        self.audit_logs = RecordStore('', seed.get('audit_logs', ()), newest_first=True)
        self.users = RecordStore('', seed.get('users', ()))

__all__ = ['RecordStore', 'Stores']
