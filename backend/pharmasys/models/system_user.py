from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SystemUser:
    STATUS_ACTIVE = 'active'
    STATUS_INACTIVE = 'inactive'

    id: str
    name: str
    email: str
    role: str
    status: str = STATUS_ACTIVE

__all__ = ["SystemUser"]
