from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Purchase:
    # Status constants
    STATUS_PENDING = 'pending'
    STATUS_APPROVED = 'approved'
    STATUS_REJECTED = 'rejected'
    STATUS_COMPLETED = 'completed'
    ALL_STATUSES = (STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED, STATUS_COMPLETED)

    id: str
    supplier: str
    date: str
    items: int
    total: float
    status: str = STATUS_PENDING
    created_by: str = ''

__all__ = ["Purchase"]
