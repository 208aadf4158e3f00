from __future__ import annotations
from flask import Blueprint
from pharmasys import get_stores
from pharmasys.models.audit import AuditEntry
from pharmasys.decorators.auth import require_session
from pharmasys.utils.filters import RecordFilter, count_where
from pharmasys.utils.listing import list_records

audit_bp = Blueprint('audit_logs', __name__)

AUDIT_FILTER = RecordFilter(search_fields=('user', 'action', 'details'), filter_fields=('module', 'type'))
FILTER_SPECS = {
    'module': {'validate': lambda v: v in AuditEntry.MODULES},
    'type': {'validate': lambda v: v in AuditEntry.ALL_TYPES},
}


def audit_stats(entries):
    stats = {'total': len(entries)}
    for t in (AuditEntry.TYPE_CREATE, AuditEntry.TYPE_UPDATE, AuditEntry.TYPE_DELETE):
        stats[t] = count_where(entries, lambda e, t=t: e.type == t)
    return stats


@audit_bp.get('')
@require_session
def list_audit_logs():
    entries = get_stores().audit_logs.all()
    return list_records(entries, AUDIT_FILTER, _entry_json, filter_specs=FILTER_SPECS, stats=audit_stats(entries))


def _entry_json(e: AuditEntry):
    return {
        'id': e.id,
        'user': e.user,
        'action': e.action,
        'module': e.module,
        'details': e.details,
        'timestamp': e.timestamp,
        'type': e.type,
    }
