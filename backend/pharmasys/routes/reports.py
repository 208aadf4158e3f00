from __future__ import annotations
from collections import OrderedDict
from datetime import date
from typing import Optional
from flask import Blueprint, request
from pharmasys import get_stores
from pharmasys.models.purchase import Purchase
from pharmasys.decorators.auth import require_session
from pharmasys.utils.filters import sum_where
from pharmasys.utils.validation import validate_choice

rpt_bp = Blueprint('reports', __name__)

REPORT_TYPES = ('sales', 'purchases', 'inventory', 'profit-loss')


def _parse_date(value: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _in_range(raw: str, start: Optional[date], end: Optional[date]) -> bool:
    d = _parse_date(raw)
    if d is None:
        return False
    if start and d < start:
        return False
    if end and d > end:
        return False
    return True


def _monthly(records, amount_field: str):
    totals = OrderedDict()
    for r in sorted(records, key=lambda r: r.date):
        month = r.date[:7]
        totals[month] = totals.get(month, 0) + getattr(r, amount_field)
    return totals


def _gather_summary(report_type: str, start: Optional[date], end: Optional[date]):
    stores = get_stores()
    sales = [s for s in stores.sales.all() if _in_range(s.date, start, end)]
    purchases = [p for p in stores.purchases.all()
                 if p.status != Purchase.STATUS_REJECTED and _in_range(p.date, start, end)]
    total_sales = sum_where(sales, 'total')
    total_purchases = sum_where(purchases, 'total')
    net_profit = total_sales - total_purchases
    summary = {
        'total_sales': total_sales,
        'total_purchases': total_purchases,
        'net_profit': net_profit,
        'profit_margin': round(net_profit / total_sales * 100, 1) if total_sales else 0,
        'total_transactions': len(sales),
        'average_order_value': round(total_sales / len(sales), 2) if sales else 0,
    }
    if report_type == 'inventory':
        by_category = OrderedDict()
        for m in stores.medicines.all():
            row = by_category.setdefault(m.category, {'category': m.category, 'count': 0, 'stock': 0, 'stock_value': 0})
            row['count'] += 1
            row['stock'] += m.stock
            row['stock_value'] = round(row['stock_value'] + m.stock * m.price, 2)
        breakdown = list(by_category.values())
    else:
        sales_by_month = _monthly(sales, 'total')
        purchases_by_month = _monthly(purchases, 'total')
        months = sorted(set(sales_by_month) | set(purchases_by_month))
        breakdown = []
        for month in months:
            s = sales_by_month.get(month, 0)
            p = purchases_by_month.get(month, 0)
            row = {'month': month}
            if report_type == 'sales':
                row['sales'] = s
            elif report_type == 'purchases':
                row['purchases'] = p
            else:
                row.update({'sales': s, 'purchases': p, 'profit': s - p})
            breakdown.append(row)
    return summary, breakdown


@rpt_bp.get('/summary')
@require_session
def report_summary():
    report_type = validate_choice(request.args.get('report_type', 'sales'), REPORT_TYPES, 'report_type')
    start_date = _parse_date(request.args.get('start_date'))
    end_date = _parse_date(request.args.get('end_date'))
    summary, breakdown = _gather_summary(report_type, start_date, end_date)
    return {
        'report_type': report_type,
        'period': {
            'start_date': start_date.isoformat() if start_date else None,
            'end_date': end_date.isoformat() if end_date else None,
        },
        'summary': summary,
        'breakdown': breakdown,
    }
