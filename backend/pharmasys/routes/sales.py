from __future__ import annotations
from datetime import date
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.sale import Sale
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter, count_where, sum_where
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, validate_choice, parse_int, parse_amount

sales_bp = Blueprint('sales', __name__)

SALE_FILTER = RecordFilter(search_fields=('id', 'pharmacy'), filter_fields=('payment',))
FILTER_SPECS = {'payment': {'validate': lambda v: v in Sale.ALL_PAYMENTS}}


def sales_stats(sales):
    return {
        'total': len(sales),
        'revenue': sum_where(sales, 'total'),
        'paid': count_where(sales, lambda s: s.payment == Sale.PAYMENT_PAID),
        'pending': count_where(sales, lambda s: s.payment == Sale.PAYMENT_PENDING),
    }


@sales_bp.get('')
@require_session
def list_sales():
    sales = get_stores().sales.all()
    return list_records(sales, SALE_FILTER, _sale_json, filter_specs=FILTER_SPECS, stats=sales_stats(sales))


@sales_bp.post('')
@require_session
@audit_log('Created Sales Invoice', module='Sales', entry_type='create', details=lambda data, kw: f"{data['id']} created for {data['pharmacy']}")
def create_sale():
    store = get_stores().sales
    data = request.json or {}
    require_fields(data, 'pharmacy', 'items', 'total')
    s = Sale(
        id=store.next_id(),
        pharmacy=data['pharmacy'],
        date=date.today().isoformat(),
        items=parse_int(data['items'], 'items'),
        total=parse_amount(data['total'], 'total'),
        payment=Sale.PAYMENT_PAID,
        method=validate_choice(data.get('method', 'cash'), Sale.ALL_METHODS, 'method'),
    )
    store.add(s)
    return _sale_json(s), 201


@sales_bp.get('/<sale_id>')
@require_session
def get_sale(sale_id: str):
    s = get_stores().sales.get(sale_id)
    if not s:
        abort(404)
    return _sale_json(s)


def _sale_json(s: Sale):
    return {
        'id': s.id,
        'pharmacy': s.pharmacy,
        'date': s.date,
        'items': s.items,
        'total': s.total,
        'payment': s.payment,
        'method': s.method,
    }
