from __future__ import annotations
from typing import List, Optional
from pharmasys.constants.navigation import NAV_ITEMS, NavItem


def is_visible(item: NavItem, role: Optional[str]) -> bool:
    return item.roles is None or (role or '') in item.roles


def visible_nav_items(role: Optional[str]) -> List[NavItem]:
    """Navigation items shown to ``role``, in menu order."""
    return [item for item in NAV_ITEMS if is_visible(item, role)]


def can_view(role: Optional[str], path: str) -> bool:
    """Whether ``path`` appears in the menu of ``role``; unknown paths are hidden."""
    item = next((i for i in NAV_ITEMS if i.path == path), None)
    return item is not None and is_visible(item, role)
