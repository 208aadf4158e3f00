from __future__ import annotations
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Medicine:
    """Inventory stock record. ``status`` is derived from ``stock`` and ``expiry``."""
    STATUS_IN_STOCK = 'in-stock'
    STATUS_LOW_STOCK = 'low-stock'
    STATUS_EXPIRING_SOON = 'expiring-soon'
    STATUS_OUT_OF_STOCK = 'out-of-stock'
    ALL_STATUSES = (STATUS_IN_STOCK, STATUS_LOW_STOCK, STATUS_EXPIRING_SOON, STATUS_OUT_OF_STOCK)
    CATEGORIES = ('Pain Relief', 'Antibiotics', 'Vitamins', 'Diabetes', 'Cardiovascular', 'Digestive')

    id: str
    name: str
    category: str
    company: str
    stock: int
    price: float
    expiry: date
    status: str

__all__ = ["Medicine"]
