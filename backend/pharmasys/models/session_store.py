from __future__ import annotations
from sqlalchemy.orm import declarative_base, Mapped, mapped_column
from sqlalchemy import String, JSON, DateTime, func
from typing import Dict, Any

Base = declarative_base()


class KeyValue(Base):
    """Browser-style key/value slot. Only the session record lives here."""
    __tablename__ = 'kv_store'
    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[str] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

__all__ = ["Base", "KeyValue"]
