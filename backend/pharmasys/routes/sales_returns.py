from __future__ import annotations
from datetime import date
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.sales_return import SalesReturn
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter, count_where, sum_where
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, validate_choice, parse_int, parse_amount

returns_bp = Blueprint('sales_returns', __name__)

RETURN_FILTER = RecordFilter(search_fields=('id', 'invoice_id'), filter_fields=('status',))
FILTER_SPECS = {'status': {'validate': lambda v: v in SalesReturn.ALL_STATUSES}}


def return_stats(returns):
    return {
        'total': len(returns),
        'approved': count_where(returns, lambda r: r.status == SalesReturn.STATUS_APPROVED),
        'pending': count_where(returns, lambda r: r.status == SalesReturn.STATUS_PENDING),
        'total_amount': sum_where(returns, 'amount'),
    }


@returns_bp.get('')
@require_session
def list_returns():
    returns = get_stores().sales_returns.all()
    return list_records(returns, RETURN_FILTER, _return_json, filter_specs=FILTER_SPECS, stats=return_stats(returns))


@returns_bp.post('')
@require_session
@audit_log('Created Sales Return', module='Sales Returns', entry_type='create', details=lambda data, kw: f"{data['id']} created for {data['invoice_id']}")
def create_return():
    store = get_stores().sales_returns
    data = request.json or {}
    require_fields(data, 'invoice_id', 'pharmacy', 'items', 'amount', 'reason')
    r = SalesReturn(
        id=store.next_id(),
        invoice_id=data['invoice_id'],
        pharmacy=data['pharmacy'],
        date=date.today().isoformat(),
        items=parse_int(data['items'], 'items'),
        amount=parse_amount(data['amount'], 'amount'),
        reason=validate_choice(data['reason'], SalesReturn.REASONS, 'reason'),
        status=SalesReturn.STATUS_PENDING,
    )
    store.add(r)
    return _return_json(r), 201


@returns_bp.get('/<return_id>')
@require_session
def get_return(return_id: str):
    r = get_stores().sales_returns.get(return_id)
    if not r:
        abort(404)
    return _return_json(r)


def _return_json(r: SalesReturn):
    return {
        'id': r.id,
        'invoice_id': r.invoice_id,
        'pharmacy': r.pharmacy,
        'date': r.date,
        'items': r.items,
        'amount': r.amount,
        'reason': r.reason,
        'status': r.status,
    }
