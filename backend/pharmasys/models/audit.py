from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AuditEntry:
    TYPE_CREATE = 'create'
    TYPE_UPDATE = 'update'
    TYPE_DELETE = 'delete'
    TYPE_APPROVE = 'approve'
    ALL_TYPES = (TYPE_CREATE, TYPE_UPDATE, TYPE_DELETE, TYPE_APPROVE)
    MODULES = ('Suppliers', 'Purchases', 'Inventory', 'Pharmacies', 'Sales', 'Sales Returns', 'Payments', 'Settings')

    id: str
    user: str
    action: str
    module: str
    details: str
    timestamp: str  # 'YYYY-MM-DD HH:MM'
    type: str

__all__ = ["AuditEntry"]
