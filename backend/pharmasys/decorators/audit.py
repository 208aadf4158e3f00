from __future__ import annotations
"""Audit logging decorator to keep add_audit() calls out of route handlers.

Usage examples:

@audit_log('Added New Supplier', module='Suppliers', entry_type='create',
           details=lambda data, kw: f"{data['name']} added")
def create_supplier():
    ... return _supplier_json(s), 201

@audit_log('Approved Purchase Order', module='Purchases', entry_type='approve',
           details=lambda data, kw: f"{data['id']} approved")
def approve_purchase(purchase_id): ...

Parameters:
  action: audit action label shown in the audit log
  module: page the change belongs to
  entry_type: create / update / delete / approve
  details: callable receiving (data, kwargs) and returning the details text;
    data is the JSON payload the view returned (may be None for empty bodies).

Return handling:
  Flask view functions commonly return one of:
    dict
    (dict, status)
    (dict, status, headers)
  The decorator extracts the first element as the JSON payload while preserving
  the original return value. Views that abort() never reach the audit step.
"""

from functools import wraps
from typing import Any, Callable, Dict, Optional

from flask import current_app

from pharmasys.services.audit import add_audit


def _extract_payload(rv: Any):
    """Return (data, status) where data is the JSON-able dict for inspection."""
    if isinstance(rv, tuple) and rv:
        status = rv[1] if len(rv) > 1 and isinstance(rv[1], int) else 200
        return rv[0], status
    return rv, 200


def audit_log(
    action: str,
    *,
    module: str,
    entry_type: str,
    details: Callable[[Optional[Dict[str, Any]], Dict[str, Any]], str],
):
    def outer(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            rv = fn(*args, **kwargs)
            data, status = _extract_payload(rv)
            if status >= 400:
                return rv
            try:
                add_audit(action, module, entry_type, details(data if isinstance(data, dict) else None, kwargs))
            except Exception:
                # audit must not interfere with the main response
                current_app.logger.exception('Failed to record audit entry for %s', action)
            return rv
        return wrapper
    return outer
