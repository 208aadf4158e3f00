from __future__ import annotations
from dataclasses import replace
from datetime import date
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.pharmacy import Pharmacy
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter, count_where, sum_where
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields

pharmacies_bp = Blueprint('pharmacies', __name__)

PHARMACY_FILTER = RecordFilter(search_fields=('name', 'owner', 'email'))
EDITABLE_FIELDS = ('name', 'owner', 'contact', 'email', 'address')


def pharmacy_stats(pharmacies):
    return {
        'total': len(pharmacies),
        'active': count_where(pharmacies, lambda p: p.active),
        'total_orders': sum_where(pharmacies, 'total_orders'),
        'total_spent': sum_where(pharmacies, 'total_spent'),
    }


@pharmacies_bp.get('')
@require_session
def list_pharmacies():
    pharmacies = get_stores().pharmacies.all()
    return list_records(pharmacies, PHARMACY_FILTER, _pharmacy_json, stats=pharmacy_stats(pharmacies))


@pharmacies_bp.post('')
@require_session
@audit_log('Registered Pharmacy', module='Pharmacies', entry_type='create', details=lambda data, kw: f"{data['name']} added")
def create_pharmacy():
    store = get_stores().pharmacies
    data = request.json or {}
    require_fields(data, *EDITABLE_FIELDS)
    p = Pharmacy(
        id=store.next_id(),
        active=True,
        total_orders=0,
        total_spent=0,
        last_order=date.today().isoformat(),
        **{k: data[k] for k in EDITABLE_FIELDS},
    )
    store.add(p)
    return _pharmacy_json(p), 201


@pharmacies_bp.get('/<pharmacy_id>')
@require_session
def get_pharmacy(pharmacy_id: str):
    p = get_stores().pharmacies.get(pharmacy_id)
    if not p:
        abort(404)
    return _pharmacy_json(p)


@pharmacies_bp.put('/<pharmacy_id>')
@require_session
@audit_log('Updated Pharmacy', module='Pharmacies', entry_type='update', details=lambda data, kw: f"{data['name']} updated")
def update_pharmacy(pharmacy_id: str):
    store = get_stores().pharmacies
    current = store.get(pharmacy_id)
    if not current:
        abort(404)
    data = request.json or {}
    changes = {k: data[k] for k in EDITABLE_FIELDS if k in data}
    if 'name' in changes and not changes['name']:
        abort(400, description='name cannot be empty')
    p = store.replace(pharmacy_id, replace(current, **changes))
    return _pharmacy_json(p)


@pharmacies_bp.post('/<pharmacy_id>/toggle')
@require_session
@audit_log('Updated Pharmacy Status', module='Pharmacies', entry_type='update',
           details=lambda data, kw: f"{data['name']} marked as {'active' if data['active'] else 'inactive'}")
def toggle_pharmacy(pharmacy_id: str):
    p = get_stores().pharmacies.update(pharmacy_id, lambda cur: replace(cur, active=not cur.active))
    if not p:
        abort(404)
    return _pharmacy_json(p)


def _pharmacy_json(p: Pharmacy):
    return {
        'id': p.id,
        'name': p.name,
        'owner': p.owner,
        'contact': p.contact,
        'email': p.email,
        'address': p.address,
        'active': p.active,
        'total_orders': p.total_orders,
        'total_spent': p.total_spent,
        'last_order': p.last_order,
    }
