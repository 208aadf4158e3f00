from __future__ import annotations
from dataclasses import replace
from datetime import date
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.supplier import Supplier
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter, count_where, sum_where
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, validate_choice

suppliers_bp = Blueprint('suppliers', __name__)

SUPPLIER_FILTER = RecordFilter(search_fields=('name', 'email'), filter_fields=('status',))
FILTER_SPECS = {'status': {'validate': lambda v: v in Supplier.ALL_STATUSES}}
EDITABLE_FIELDS = ('name', 'contact', 'email', 'address', 'status')


def supplier_stats(suppliers):
    return {
        'total': len(suppliers),
        'active': count_where(suppliers, lambda s: s.status == Supplier.STATUS_ACTIVE),
        'inactive': count_where(suppliers, lambda s: s.status == Supplier.STATUS_INACTIVE),
        'total_products': sum_where(suppliers, 'total_products'),
    }


@suppliers_bp.get('')
@require_session
def list_suppliers():
    suppliers = get_stores().suppliers.all()
    return list_records(suppliers, SUPPLIER_FILTER, _supplier_json, filter_specs=FILTER_SPECS, stats=supplier_stats(suppliers))


@suppliers_bp.post('')
@require_session
@audit_log('Added New Supplier', module='Suppliers', entry_type='create', details=lambda data, kw: f"{data['name']} added")
def create_supplier():
    store = get_stores().suppliers
    data = request.json or {}
    require_fields(data, 'name', 'contact', 'email', 'address')
    s = Supplier(
        id=store.next_id(),
        name=data['name'],
        contact=data['contact'],
        email=data['email'],
        address=data['address'],
        status=validate_choice(data.get('status', Supplier.STATUS_ACTIVE), Supplier.ALL_STATUSES),
        total_products=0,
        last_order=date.today().isoformat(),
    )
    store.add(s)
    return _supplier_json(s), 201


@suppliers_bp.get('/<supplier_id>')
@require_session
def get_supplier(supplier_id: str):
    s = get_stores().suppliers.get(supplier_id)
    if not s:
        abort(404)
    return _supplier_json(s)


@suppliers_bp.put('/<supplier_id>')
@require_session
@audit_log('Updated Supplier', module='Suppliers', entry_type='update', details=lambda data, kw: f"{data['name']} updated")
def update_supplier(supplier_id: str):
    store = get_stores().suppliers
    current = store.get(supplier_id)
    if not current:
        abort(404)
    data = request.json or {}
    changes = {k: data[k] for k in EDITABLE_FIELDS if k in data}
    for k in ('name', 'email'):
        if k in changes and not changes[k]:
            abort(400, description=f'{k} cannot be empty')
    if 'status' in changes:
        validate_choice(changes['status'], Supplier.ALL_STATUSES)
    s = store.replace(supplier_id, replace(current, **changes))
    return _supplier_json(s)


@suppliers_bp.delete('/<supplier_id>')
@require_session
@audit_log('Deleted Supplier', module='Suppliers', entry_type='delete', details=lambda data, kw: f"{kw['supplier_id']} removed")
def delete_supplier(supplier_id: str):
    if not get_stores().suppliers.remove(supplier_id):
        abort(404)
    return {'status': 'deleted'}


def _supplier_json(s: Supplier):
    return {
        'id': s.id,
        'name': s.name,
        'contact': s.contact,
        'email': s.email,
        'address': s.address,
        'status': s.status,
        'total_products': s.total_products,
        'last_order': s.last_order,
    }
