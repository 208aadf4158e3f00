"""Roles and the dashboard navigation allow-list.
Visibility only: a role missing from an item hides it from the menu, it does not
block the route.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

ROLE_ADMIN = 'admin'
ROLE_PROCUREMENT = 'procurement'
ROLE_SALES = 'sales'
ROLE_INVENTORY = 'inventory'
ROLE_PHARMACY = 'pharmacy'

ROLES = [ROLE_ADMIN, ROLE_PROCUREMENT, ROLE_SALES, ROLE_INVENTORY, ROLE_PHARMACY]

ROLE_LABELS = {
    ROLE_ADMIN: 'Admin / Manager',
    ROLE_PROCUREMENT: 'Procurement Officer',
    ROLE_SALES: 'Sales Officer',
    ROLE_INVENTORY: 'Inventory Officer',
    ROLE_PHARMACY: 'Pharmacy Customer',
}


@dataclass(frozen=True)
class NavItem:
    name: str
    path: str
    roles: Optional[Tuple[str, ...]] = None  # None: every role


NAV_ITEMS: List[NavItem] = [
    NavItem('Dashboard', '/dashboard'),
    NavItem('Suppliers', '/suppliers', (ROLE_ADMIN, ROLE_PROCUREMENT)),
    NavItem('Purchases', '/purchases', (ROLE_ADMIN, ROLE_PROCUREMENT)),
    NavItem('Inventory', '/inventory', (ROLE_ADMIN, ROLE_INVENTORY, ROLE_PROCUREMENT)),
    NavItem('Pharmacies', '/pharmacies', (ROLE_ADMIN, ROLE_SALES)),
    NavItem('Sales', '/sales', (ROLE_ADMIN, ROLE_SALES)),
    NavItem('Sales Returns', '/sales-returns', (ROLE_ADMIN, ROLE_SALES)),
    NavItem('Payments', '/payments', (ROLE_ADMIN, ROLE_SALES)),
    NavItem('Reports', '/reports', (ROLE_ADMIN,)),
    NavItem('Audit Logs', '/audit-logs', (ROLE_ADMIN,)),
    NavItem('Settings', '/settings'),
]
