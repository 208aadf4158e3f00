from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Payment:
    STATUS_COMPLETED = 'completed'
    STATUS_PENDING = 'pending'
    STATUS_FAILED = 'failed'
    ALL_STATUSES = (STATUS_COMPLETED, STATUS_PENDING, STATUS_FAILED)
    ALL_METHODS = ('cash', 'credit', 'bank-transfer', 'check')

    id: str
    invoice_id: str
    pharmacy: str
    date: str
    amount: float
    method: str
    status: str = STATUS_COMPLETED

__all__ = ["Payment"]
