from __future__ import annotations
from datetime import date
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.models.payment import Payment
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter, count_where, sum_where
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, validate_choice, parse_amount

payments_bp = Blueprint('payments', __name__)

PAYMENT_FILTER = RecordFilter(search_fields=('id', 'invoice_id'), filter_fields=('status',))
FILTER_SPECS = {'status': {'validate': lambda v: v in Payment.ALL_STATUSES}}


def _completed(p):
    return p.status == Payment.STATUS_COMPLETED


def payment_stats(payments):
    return {
        'total': len(payments),
        'completed_amount': sum_where(payments, 'amount', _completed),
        'pending_amount': sum_where(payments, 'amount', lambda p: p.status == Payment.STATUS_PENDING),
        'completed': count_where(payments, _completed),
    }


@payments_bp.get('')
@require_session
def list_payments():
    payments = get_stores().payments.all()
    return list_records(payments, PAYMENT_FILTER, _payment_json, filter_specs=FILTER_SPECS, stats=payment_stats(payments))


@payments_bp.post('')
@require_session
@audit_log('Recorded Payment', module='Payments', entry_type='create', details=lambda data, kw: f"{data['id']} recorded for {data['invoice_id']}")
def create_payment():
    store = get_stores().payments
    data = request.json or {}
    require_fields(data, 'invoice_id', 'pharmacy', 'amount')
    p = Payment(
        id=store.next_id(),
        invoice_id=data['invoice_id'],
        pharmacy=data['pharmacy'],
        date=date.today().isoformat(),
        amount=parse_amount(data['amount'], 'amount'),
        method=validate_choice(data.get('method', 'bank-transfer'), Payment.ALL_METHODS, 'method'),
        status=Payment.STATUS_COMPLETED,
    )
    store.add(p)
    return _payment_json(p), 201


@payments_bp.get('/<payment_id>')
@require_session
def get_payment(payment_id: str):
    p = get_stores().payments.get(payment_id)
    if not p:
        abort(404)
    return _payment_json(p)


def _payment_json(p: Payment):
    return {
        'id': p.id,
        'invoice_id': p.invoice_id,
        'pharmacy': p.pharmacy,
        'date': p.date,
        'amount': p.amount,
        'method': p.method,
        'status': p.status,
    }
