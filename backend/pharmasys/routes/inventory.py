from __future__ import annotations
from dataclasses import replace
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.medicine import Medicine
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.services.stock_status import classify
from pharmasys.utils.filters import RecordFilter, count_where
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, validate_choice, parse_int, parse_amount, parse_date

inv_bp = Blueprint('inventory', __name__)

MEDICINE_FILTER = RecordFilter(search_fields=('name', 'company'), filter_fields=('category', 'status'))
FILTER_SPECS = {
    'category': {'validate': lambda v: v in Medicine.CATEGORIES},
    'status': {'validate': lambda v: v in Medicine.ALL_STATUSES},
}


def inventory_stats(medicines):
    return {
        'total': len(medicines),
        'low_stock': count_where(medicines, lambda m: m.status == Medicine.STATUS_LOW_STOCK),
        'expiring_soon': count_where(medicines, lambda m: m.status == Medicine.STATUS_EXPIRING_SOON),
        'out_of_stock': count_where(medicines, lambda m: m.status == Medicine.STATUS_OUT_OF_STOCK),
    }


@inv_bp.get('/medicines')
@require_session
def list_medicines():
    medicines = get_stores().medicines.all()
    return list_records(medicines, MEDICINE_FILTER, _medicine_json, filter_specs=FILTER_SPECS, stats=inventory_stats(medicines))


@inv_bp.post('/medicines')
@require_session
@audit_log('Added Medicine', module='Inventory', entry_type='create', details=lambda data, kw: f"{data['name']} added with stock {data['stock']}")
def create_medicine():
    store = get_stores().medicines
    fields = _read_form(request.json or {})
    m = Medicine(id=store.next_id(), status=classify(fields['stock'], fields['expiry']), **fields)
    store.add(m)
    return _medicine_json(m), 201


@inv_bp.get('/medicines/<medicine_id>')
@require_session
def get_medicine(medicine_id: str):
    m = get_stores().medicines.get(medicine_id)
    if not m:
        abort(404)
    return _medicine_json(m)


@inv_bp.put('/medicines/<medicine_id>')
@require_session
@audit_log('Updated Stock', module='Inventory', entry_type='update', details=lambda data, kw: f"{data['name']} stock updated to {data['stock']}")
def update_medicine(medicine_id: str):
    store = get_stores().medicines
    current = store.get(medicine_id)
    if not current:
        abort(404)
    fields = _read_form(request.json or {}, current)
    # status is derived, never taken from input
    m = replace(current, status=classify(fields['stock'], fields['expiry']), **fields)
    store.replace(medicine_id, m)
    return _medicine_json(m)


def _read_form(data: dict, current: Medicine | None = None) -> dict:
    """Coerce the medicine form; on update, omitted fields keep their current value."""
    if current is None:
        require_fields(data, 'name', 'category', 'company', 'stock', 'price', 'expiry')
    else:
        data = {
            'name': current.name, 'category': current.category, 'company': current.company,
            'stock': current.stock, 'price': current.price, 'expiry': current.expiry.isoformat(),
            **{k: v for k, v in data.items() if v is not None},
        }
        require_fields(data, 'name', 'company')
    return {
        'name': data['name'],
        'category': validate_choice(data['category'], Medicine.CATEGORIES, 'category'),
        'company': data['company'],
        'stock': parse_int(data['stock'], 'stock'),
        'price': parse_amount(data['price'], 'price'),
        'expiry': parse_date(data['expiry'], 'expiry'),
    }


def _medicine_json(m: Medicine):
    return {
        'id': m.id,
        'name': m.name,
        'category': m.category,
        'company': m.company,
        'stock': m.stock,
        'price': m.price,
        'expiry': m.expiry.isoformat(),
        'status': m.status,
    }
