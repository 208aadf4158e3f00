from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Sale:
    PAYMENT_PAID = 'paid'
    PAYMENT_PENDING = 'pending'
    PAYMENT_PARTIAL = 'partial'
    ALL_PAYMENTS = (PAYMENT_PAID, PAYMENT_PENDING, PAYMENT_PARTIAL)
    ALL_METHODS = ('cash', 'credit', 'bank-transfer')

    id: str
    pharmacy: str
    date: str
    items: int
    total: float
    payment: str = PAYMENT_PAID
    method: str = 'cash'

__all__ = ["Sale"]
