from __future__ import annotations
from dataclasses import replace
from datetime import date
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.purchase import Purchase
from pharmasys.decorators.auth import require_session, current_user
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter, count_where, sum_where
from pharmasys.utils.fsm import TransitionValidator
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, parse_int, parse_amount

po_bp = Blueprint('purchases', __name__)

PURCHASE_FILTER = RecordFilter(search_fields=('id', 'supplier'), filter_fields=('status',))
FILTER_SPECS = {'status': {'validate': lambda v: v in Purchase.ALL_STATUSES}}
# Only pending orders can be decided
PURCHASE_FSM = TransitionValidator({
    Purchase.STATUS_PENDING: {Purchase.STATUS_APPROVED, Purchase.STATUS_REJECTED},
    Purchase.STATUS_APPROVED: set(),
    Purchase.STATUS_REJECTED: set(),
    Purchase.STATUS_COMPLETED: set(),
})


def purchase_stats(purchases):
    return {
        'total': len(purchases),
        'pending': count_where(purchases, lambda p: p.status == Purchase.STATUS_PENDING),
        'approved': count_where(purchases, lambda p: p.status == Purchase.STATUS_APPROVED),
        'total_value': sum_where(purchases, 'total'),
    }


@po_bp.get('')
@require_session
def list_purchases():
    purchases = get_stores().purchases.all()
    return list_records(purchases, PURCHASE_FILTER, _purchase_json, filter_specs=FILTER_SPECS, stats=purchase_stats(purchases))


@po_bp.post('')
@require_session
@audit_log('Created Purchase Order', module='Purchases', entry_type='create', details=lambda data, kw: f"{data['id']} created")
def create_purchase():
    store = get_stores().purchases
    data = request.json or {}
    require_fields(data, 'supplier', 'items', 'total')
    p = Purchase(
        id=store.next_id(),
        supplier=data['supplier'],
        date=date.today().isoformat(),
        items=parse_int(data['items'], 'items'),
        total=parse_amount(data['total'], 'total'),
        status=Purchase.STATUS_PENDING,
        created_by=current_user().name,
    )
    store.add(p)
    return _purchase_json(p), 201


@po_bp.get('/<purchase_id>')
@require_session
def get_purchase(purchase_id: str):
    p = get_stores().purchases.get(purchase_id)
    if not p:
        abort(404)
    return _purchase_json(p)


@po_bp.post('/<purchase_id>/approve')
@require_session
@audit_log('Approved Purchase Order', module='Purchases', entry_type='approve', details=lambda data, kw: f"{data['id']} approved")
def approve_purchase(purchase_id: str):
    return _transition(purchase_id, Purchase.STATUS_APPROVED)


@po_bp.post('/<purchase_id>/reject')
@require_session
@audit_log('Rejected Purchase Order', module='Purchases', entry_type='update', details=lambda data, kw: f"{data['id']} rejected")
def reject_purchase(purchase_id: str):
    return _transition(purchase_id, Purchase.STATUS_REJECTED)


def _transition(purchase_id: str, target: str):
    store = get_stores().purchases
    p = store.get(purchase_id)
    if not p:
        abort(404)
    PURCHASE_FSM.assert_can_transition(p.status, target)
    p = store.replace(purchase_id, replace(p, status=target))
    return _purchase_json(p)


def _purchase_json(p: Purchase):
    return {
        'id': p.id,
        'supplier': p.supplier,
        'date': p.date,
        'items': p.items,
        'total': p.total,
        'status': p.status,
        'created_by': p.created_by,
    }
