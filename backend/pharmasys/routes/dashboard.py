from __future__ import annotations
from datetime import date
from typing import Optional
from flask import Blueprint, current_app
from pharmasys import get_stores
from pharmasys.constants.navigation import ROLE_ADMIN, ROLE_PROCUREMENT, ROLE_SALES, ROLE_INVENTORY, ROLE_PHARMACY, ROLE_LABELS
from pharmasys.decorators.auth import require_session, current_user
from pharmasys.models.medicine import Medicine
from pharmasys.models.purchase import Purchase
from pharmasys.models.sale import Sale
from pharmasys.models.supplier import Supplier
from pharmasys.utils.filters import count_where, sum_where

dash_bp = Blueprint('dashboard', __name__)

RECENT_ORDERS_LIMIT = 4
RECENT_ORDER_ROLES = (ROLE_ADMIN, ROLE_SALES, ROLE_PHARMACY)
CATEGORY_ROLES = (ROLE_ADMIN, ROLE_SALES)


def _admin_cards(stores, today: date):
    sales = stores.sales.all()
    month = today.isoformat()[:7]
    return {
        'total_medicines': len(stores.medicines),
        'active_pharmacies': count_where(stores.pharmacies.all(), lambda p: p.active),
        'low_stock_items': count_where(stores.medicines.all(), lambda m: m.status == Medicine.STATUS_LOW_STOCK),
        'todays_orders': count_where(sales, lambda s: s.date == today.isoformat()),
        'monthly_sales': sum_where(sales, 'total', lambda s: s.date.startswith(month)),
        'total_revenue': sum_where(sales, 'total'),
        'active_suppliers': count_where(stores.suppliers.all(), lambda s: s.status == Supplier.STATUS_ACTIVE),
        'pending_orders': count_where(stores.purchases.all(), lambda p: p.status == Purchase.STATUS_PENDING),
    }


def _procurement_cards(stores, today: date):
    purchases = stores.purchases.all()
    month = today.isoformat()[:7]
    return {
        'purchase_orders': len(purchases),
        'active_suppliers': count_where(stores.suppliers.all(), lambda s: s.status == Supplier.STATUS_ACTIVE),
        'pending_approvals': count_where(purchases, lambda p: p.status == Purchase.STATUS_PENDING),
        'monthly_purchases': sum_where(purchases, 'total', lambda p: p.date.startswith(month)),
    }


def _sales_cards(stores, today: date):
    sales = stores.sales.all()
    return {
        'daily_sales': sum_where(sales, 'total', lambda s: s.date == today.isoformat()),
        'todays_orders': count_where(sales, lambda s: s.date == today.isoformat()),
        'active_pharmacies': count_where(stores.pharmacies.all(), lambda p: p.active),
        'pending_payments': sum_where(sales, 'total', lambda s: s.payment != Sale.PAYMENT_PAID),
    }


def _inventory_cards(stores, today: date):
    medicines = stores.medicines.all()
    return {
        'total_medicines': len(medicines),
        'low_stock_items': count_where(medicines, lambda m: m.status == Medicine.STATUS_LOW_STOCK),
        'expiring_soon': count_where(medicines, lambda m: m.status == Medicine.STATUS_EXPIRING_SOON),
        'stock_value': round(sum(m.stock * m.price for m in medicines), 2),
    }


def _pharmacy_orders(stores, email: Optional[str]):
    pharmacy = next((p for p in stores.pharmacies.all() if p.email == email), None)
    return [s for s in stores.sales.all() if pharmacy and s.pharmacy == pharmacy.name]


def _pharmacy_cards(stores, today: date, email: Optional[str] = None):
    orders = _pharmacy_orders(stores, email)
    outstanding = sum_where(orders, 'total', lambda s: s.payment != Sale.PAYMENT_PAID)
    return {
        'my_orders': len(orders),
        'pending_orders': count_where(orders, lambda s: s.payment != Sale.PAYMENT_PAID),
        'total_spent': sum_where(orders, 'total'),
        'available_credit': max(current_app.config['PHARMACY_CREDIT_LIMIT'] - outstanding, 0),
    }


CARD_BUILDERS = {
    ROLE_ADMIN: _admin_cards,
    ROLE_PROCUREMENT: _procurement_cards,
    ROLE_SALES: _sales_cards,
    ROLE_INVENTORY: _inventory_cards,
}


def dashboard_cards(role: str, email: str, today: Optional[date] = None):
    """Stat cards for one role, computed over the unfiltered stores."""
    today = today or date.today()
    stores = get_stores()
    if role == ROLE_PHARMACY:
        return _pharmacy_cards(stores, today, email)
    return CARD_BUILDERS.get(role, _admin_cards)(stores, today)


def recent_orders(role: str, email: str):
    """Latest sales for the role; a pharmacy only sees its own orders."""
    stores = get_stores()
    orders = _pharmacy_orders(stores, email) if role == ROLE_PHARMACY else stores.sales.all()
    return [
        {'id': s.id, 'pharmacy': s.pharmacy, 'amount': s.total, 'payment': s.payment, 'date': s.date}
        for s in orders[:RECENT_ORDERS_LIMIT]
    ]


def category_counts():
    counts = {}
    for m in get_stores().medicines.all():
        counts[m.category] = counts.get(m.category, 0) + 1
    return [{'category': name, 'count': n} for name, n in counts.items()]


@dash_bp.get('/dashboard')
@require_session
def dashboard():
    user = current_user()
    body = {
        'role': user.role,
        'role_label': ROLE_LABELS.get(user.role, user.role),
        'cards': dashboard_cards(user.role, user.email),
    }
    if user.role in RECENT_ORDER_ROLES:
        body['recent_orders'] = recent_orders(user.role, user.email)
    if user.role in CATEGORY_ROLES:
        body['categories'] = category_counts()
    return body
