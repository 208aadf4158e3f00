from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SalesReturn:
    STATUS_APPROVED = 'approved'
    STATUS_PENDING = 'pending'
    STATUS_REJECTED = 'rejected'
    ALL_STATUSES = (STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED)
    REASONS = ('Damaged products', 'Wrong item', 'Expired', 'Quality issue', 'Other')

    id: str
    invoice_id: str
    pharmacy: str
    date: str
    items: int
    amount: float
    reason: str
    status: str = STATUS_PENDING

__all__ = ["SalesReturn"]
