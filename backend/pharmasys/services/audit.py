from __future__ import annotations
from datetime import datetime
from typing import Optional
from pharmasys import get_stores, get_session_context
from pharmasys.models.audit import AuditEntry


def add_audit(action: str, module: str, entry_type: str, details: str, user: Optional[str] = None) -> AuditEntry:
    """Prepend an entry to the in-memory audit log.

    Parameters:
      action: human readable action e.g. 'Approved Purchase Order'
      module: page the change belongs to (one of AuditEntry.MODULES)
      entry_type: create / update / delete / approve
      details: short description naming the affected record
      user: actor name; defaults to the signed-in user
    """
    stores = get_stores()
    if user is None:
        session_user = get_session_context().user
        user = session_user.name if session_user else 'System'
    entry = AuditEntry(
        id=stores.audit_logs.next_id(),
        user=user,
        action=action,
        module=module,
        details=details,
        timestamp=datetime.now().strftime('%Y-%m-%d %H:%M'),
        type=entry_type,
    )
    return stores.audit_logs.add(entry)
