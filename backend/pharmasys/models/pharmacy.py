from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Pharmacy:
    id: str
    name: str
    owner: str
    contact: str
    email: str
    address: str
    active: bool = True
    total_orders: int = 0
    total_spent: float = 0
    last_order: str = ''

__all__ = ["Pharmacy"]
