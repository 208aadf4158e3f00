"""Seed records loaded into the in-memory stores at startup.

Medicine statuses are not part of the seed: they are derived from stock and
expiry when the stores are built.
"""
from __future__ import annotations
from datetime import date
from typing import Optional

from pharmasys.models.medicine import Medicine
from pharmasys.models.supplier import Supplier
from pharmasys.models.purchase import Purchase
from pharmasys.models.pharmacy import Pharmacy
from pharmasys.models.sale import Sale
from pharmasys.models.sales_return import SalesReturn
from pharmasys.models.payment import Payment
from pharmasys.models.audit import AuditEntry
from pharmasys.models.system_user import SystemUser
from pharmasys.services.stock_status import classify
from pharmasys.services.store import Stores

# (id, name, category, company, stock, price, expiry)
MEDICINES = [
    ('MED-001', 'Paracetamol 500mg', 'Pain Relief', 'PharmaCorp', 450, 2.50, '2026-06-15'),
    ('MED-002', 'Amoxicillin 250mg', 'Antibiotics', 'MediSupply', 85, 5.75, '2025-12-20'),
    ('MED-003', 'Ibuprofen 400mg', 'Pain Relief', 'Global Pharma', 320, 3.20, '2026-03-10'),
    ('MED-004', 'Omeprazole 20mg', 'Digestive', 'MedTech', 15, 4.50, '2025-11-05'),
    ('MED-005', 'Metformin 500mg', 'Diabetes', 'PharmaCorp', 0, 6.80, '2026-01-30'),
    ('MED-006', 'Aspirin 75mg', 'Cardiovascular', 'Global Pharma', 520, 1.90, '2026-08-12'),
    ('MED-007', 'Ciprofloxacin 500mg', 'Antibiotics', 'MediSupply', 68, 7.25, '2025-11-15'),
    ('MED-008', 'Vitamin D3 1000IU', 'Vitamins', 'MedTech', 280, 8.50, '2026-09-25'),
]

SUPPLIERS = [
    Supplier('SUP-001', 'PharmaCorp Ltd', '+1-234-567-8901', 'contact@pharmacorp.com', '123 Medical St, NY', 'active', 245, '2025-10-25'),
    Supplier('SUP-002', 'MediSupply Inc', '+1-234-567-8902', 'info@medisupply.com', '456 Health Ave, CA', 'active', 189, '2025-10-24'),
    Supplier('SUP-003', 'Global Pharma', '+1-234-567-8903', 'sales@globalpharma.com', '789 Drug Rd, TX', 'active', 312, '2025-10-26'),
    Supplier('SUP-004', 'HealthFirst Suppliers', '+1-234-567-8904', 'support@healthfirst.com', '321 Wellness Blvd, FL', 'inactive', 156, '2025-09-15'),
    Supplier('SUP-005', 'MedTech Solutions', '+1-234-567-8905', 'info@medtech.com', '654 Innovation Dr, WA', 'active', 278, '2025-10-27'),
]

PURCHASES = [
    Purchase('PO-001', 'PharmaCorp Ltd', '2025-10-28', 25, 12500, 'pending', 'John Doe'),
    Purchase('PO-002', 'MediSupply Inc', '2025-10-27', 18, 8900, 'approved', 'Jane Smith'),
    Purchase('PO-003', 'Global Pharma', '2025-10-26', 32, 15600, 'completed', 'John Doe'),
    Purchase('PO-004', 'MedTech Solutions', '2025-10-25', 15, 7200, 'approved', 'Jane Smith'),
    Purchase('PO-005', 'PharmaCorp Ltd', '2025-10-24', 22, 11300, 'rejected', 'John Doe'),
]

PHARMACIES = [
    Pharmacy('PHR-001', 'City Pharmacy', 'John Smith', '+1-555-0101', 'city@pharmacy.com', '123 Main St, NY', True, 45, 125000, '2025-10-27'),
    Pharmacy('PHR-002', 'Health Plus', 'Sarah Johnson', '+1-555-0102', 'health@plus.com', '456 Oak Ave, CA', True, 32, 89000, '2025-10-26'),
    Pharmacy('PHR-003', 'MediCare', 'Mike Brown', '+1-555-0103', 'info@medicare.com', '789 Pine Rd, TX', True, 58, 156000, '2025-10-28'),
    Pharmacy('PHR-004', 'Wellness Pharmacy', 'Lisa Davis', '+1-555-0104', 'wellness@pharma.com', '321 Elm St, FL', False, 21, 45000, '2025-09-10'),
]

SALES = [
    Sale('INV-001', 'City Pharmacy', '2025-10-28', 8, 2500, 'paid', 'bank-transfer'),
    Sale('INV-002', 'Health Plus', '2025-10-28', 5, 1800, 'pending', 'credit'),
    Sale('INV-003', 'MediCare', '2025-10-27', 12, 3200, 'paid', 'cash'),
    Sale('INV-004', 'Wellness Pharmacy', '2025-10-27', 6, 1500, 'partial', 'bank-transfer'),
    Sale('INV-005', 'City Pharmacy', '2025-10-26', 10, 2800, 'paid', 'credit'),
]

SALES_RETURNS = [
    SalesReturn('RET-001', 'INV-003', 'City Pharmacy', '2025-10-28', 2, 450, 'Damaged products', 'approved'),
    SalesReturn('RET-002', 'INV-002', 'Health Plus', '2025-10-27', 1, 180, 'Wrong item', 'pending'),
    SalesReturn('RET-003', 'INV-005', 'MediCare', '2025-10-26', 3, 620, 'Expired', 'approved'),
]

PAYMENTS = [
    Payment('PAY-001', 'INV-001', 'City Pharmacy', '2025-10-28', 2500, 'bank-transfer', 'completed'),
    Payment('PAY-002', 'INV-002', 'Health Plus', '2025-10-28', 1800, 'credit', 'pending'),
    Payment('PAY-003', 'INV-003', 'MediCare', '2025-10-27', 3200, 'cash', 'completed'),
    Payment('PAY-004', 'INV-004', 'Wellness Pharmacy', '2025-10-27', 750, 'bank-transfer', 'completed'),
    Payment('PAY-005', 'INV-005', 'City Pharmacy', '2025-10-26', 2800, 'check', 'pending'),
]

AUDIT_LOGS = [
    AuditEntry('1', 'Admin User', 'Approved Purchase Order', 'Purchases', 'PO-002 approved', '2025-10-28 10:30', 'approve'),
    AuditEntry('2', 'Sales Officer', 'Created Sales Invoice', 'Sales', 'INV-001 created for City Pharmacy', '2025-10-28 09:15', 'create'),
    AuditEntry('3', 'Inventory Officer', 'Updated Stock', 'Inventory', 'Paracetamol stock updated to 450', '2025-10-28 08:45', 'update'),
    AuditEntry('4', 'Procurement Officer', 'Created Purchase Order', 'Purchases', 'PO-003 created', '2025-10-27 16:20', 'create'),
    AuditEntry('5', 'Admin User', 'Added New Supplier', 'Suppliers', 'MedTech Solutions added', '2025-10-27 14:10', 'create'),
    AuditEntry('6', 'Sales Officer', 'Updated Payment Status', 'Payments', 'PAY-001 marked as completed', '2025-10-27 11:30', 'update'),
    AuditEntry('7', 'Inventory Officer', 'Deleted Expired Medicine', 'Inventory', 'MED-089 removed from inventory', '2025-10-26 15:45', 'delete'),
    AuditEntry('8', 'Admin User', 'Added New User', 'Settings', 'New sales officer account created', '2025-10-26 09:00', 'create'),
]

USERS = [
    SystemUser('1', 'Admin User', 'admin@pharma.com', 'admin', 'active'),
    SystemUser('2', 'John Procurement', 'john@pharma.com', 'procurement', 'active'),
    SystemUser('3', 'Sarah Sales', 'sarah@pharma.com', 'sales', 'active'),
    SystemUser('4', 'Mike Inventory', 'mike@pharma.com', 'inventory', 'active'),
]


def build_medicines(today: Optional[date] = None):
    out = []
    for mid, name, category, company, stock, price, expiry_raw in MEDICINES:
        expiry = date.fromisoformat(expiry_raw)
        out.append(Medicine(mid, name, category, company, stock, price, expiry, classify(stock, expiry, today)))
    return out


def build_stores(today: Optional[date] = None) -> Stores:
    return Stores(
        medicines=build_medicines(today),
        suppliers=SUPPLIERS,
        purchases=PURCHASES,
        pharmacies=PHARMACIES,
        sales=SALES,
        sales_returns=SALES_RETURNS,
        payments=PAYMENTS,
        audit_logs=AUDIT_LOGS,
        users=USERS,
    )
