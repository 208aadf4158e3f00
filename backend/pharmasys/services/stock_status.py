from __future__ import annotations
"""Derived stock status for inventory records.

Rules are evaluated in order and the first match wins:

    stock == 0              -> out-of-stock
    stock < 100             -> low-stock
    days to expiry < 30     -> expiring-soon
    otherwise               -> in-stock

Days to expiry are whole calendar days and may be negative. An already expired
item with 100 units or more is reported as expiring-soon; there is no separate
expired state.
"""
from datetime import date
from typing import Optional

from pharmasys.models.medicine import Medicine

LOW_STOCK_THRESHOLD = 100
EXPIRY_WINDOW_DAYS = 30


def days_until_expiry(expiry: date, today: Optional[date] = None) -> int:
    return (expiry - (today or date.today())).days


def classify(quantity: int, expiry: date, today: Optional[date] = None) -> str:
    if quantity == 0:
        return Medicine.STATUS_OUT_OF_STOCK
    if quantity < LOW_STOCK_THRESHOLD:
        return Medicine.STATUS_LOW_STOCK
    if days_until_expiry(expiry, today) < EXPIRY_WINDOW_DAYS:
        return Medicine.STATUS_EXPIRING_SOON
    return Medicine.STATUS_IN_STOCK

__all__ = ['classify', 'days_until_expiry', 'LOW_STOCK_THRESHOLD', 'EXPIRY_WINDOW_DAYS']
