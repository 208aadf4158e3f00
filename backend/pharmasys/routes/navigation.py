from flask import Blueprint, request
from pharmasys.constants.navigation import ROLE_LABELS
from pharmasys.decorators.auth import require_session, current_user
from pharmasys.services.policy import visible_nav_items, can_view

nav_bp = Blueprint('navigation', __name__)


@nav_bp.get('/nav')
@require_session
def list_nav():
    user = current_user()
    items = [{'name': i.name, 'path': i.path} for i in visible_nav_items(user.role)]
    return {
        'user': {'name': user.name, 'email': user.email, 'role': user.role, 'role_label': ROLE_LABELS.get(user.role, user.role)},
        'items': items,
    }


@nav_bp.get('/nav/check')
@require_session
def check_nav():
    """Tell the client whether a path belongs in the menu of the current role."""
    path = request.args.get('path', '')
    return {'path': path, 'visible': can_view(current_user().role, path)}
