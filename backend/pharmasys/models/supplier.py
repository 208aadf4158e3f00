from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Supplier:
    STATUS_ACTIVE = 'active'
    STATUS_INACTIVE = 'inactive'
    ALL_STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE)

    id: str
    name: str
    contact: str
    email: str
    address: str
    status: str = STATUS_ACTIVE
    total_products: int = 0
    last_order: str = ''

__all__ = ["Supplier"]
