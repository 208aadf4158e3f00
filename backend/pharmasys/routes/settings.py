from __future__ import annotations
from dataclasses import replace
from flask import Blueprint, request, abort
from pharmasys import get_stores
from pharmasys.constants.navigation import ROLES, ROLE_LABELS
from pharmasys.models.system_user import SystemUser
from pharmasys.decorators.auth import require_session
from pharmasys.decorators.audit import audit_log
from pharmasys.utils.filters import RecordFilter
from pharmasys.utils.listing import list_records
from pharmasys.utils.validation import require_fields, validate_choice

settings_bp = Blueprint('settings', __name__)

USER_FILTER = RecordFilter(search_fields=('name', 'email'), filter_fields=('role',))
FILTER_SPECS = {'role': {'validate': lambda v: v in ROLES}}
EDITABLE_FIELDS = ('name', 'email', 'role')


@settings_bp.get('/users')
@require_session
def list_users():
    users = get_stores().users.all()
    return list_records(users, USER_FILTER, _user_json, filter_specs=FILTER_SPECS)


@settings_bp.post('/users')
@require_session
@audit_log('Added New User', module='Settings', entry_type='create', details=lambda data, kw: f"New {data['role']} account created for {data['name']}")
def create_user():
    store = get_stores().users
    data = request.json or {}
    require_fields(data, 'name', 'email')
    u = SystemUser(
        id=store.next_id(),
        name=data['name'],
        email=data['email'],
        role=validate_choice(data.get('role', 'sales'), ROLES, 'role'),
        status=SystemUser.STATUS_ACTIVE,
    )
    store.add(u)
    return _user_json(u), 201


@settings_bp.put('/users/<user_id>')
@require_session
@audit_log('Updated User', module='Settings', entry_type='update', details=lambda data, kw: f"{data['name']} updated")
def update_user(user_id: str):
    store = get_stores().users
    current = store.get(user_id)
    if not current:
        abort(404)
    data = request.json or {}
    changes = {k: data[k] for k in EDITABLE_FIELDS if k in data}
    for k in ('name', 'email'):
        if k in changes and not changes[k]:
            abort(400, description=f'{k} cannot be empty')
    if 'role' in changes:
        validate_choice(changes['role'], ROLES, 'role')
    u = store.replace(user_id, replace(current, **changes))
    return _user_json(u)


@settings_bp.delete('/users/<user_id>')
@require_session
@audit_log('Deleted User', module='Settings', entry_type='delete', details=lambda data, kw: f"User {kw['user_id']} removed")
def delete_user(user_id: str):
    if not get_stores().users.remove(user_id):
        abort(404)
    return {'status': 'deleted'}


def _user_json(u: SystemUser):
    return {
        'id': u.id,
        'name': u.name,
        'email': u.email,
        'role': u.role,
        'role_label': ROLE_LABELS.get(u.role, u.role),
        'status': u.status,
    }
