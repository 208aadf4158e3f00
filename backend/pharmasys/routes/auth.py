from flask import Blueprint, request, abort, current_app
from flask_jwt_extended import create_access_token
from pharmasys import get_session_context
from pharmasys.constants.navigation import ROLES, ROLE_PHARMACY
from pharmasys.decorators.auth import require_session, current_user
from pharmasys.services import session as session_service
from pharmasys.utils.validation import require_fields, validate_choice

auth_bp = Blueprint('auth', __name__)


def _session_payload(user: session_service.SessionUser):
    # JWT identity must be a string (flask-jwt-extended v4 requirement)
    token = create_access_token(identity=user.id, additional_claims={
        'name': user.name,
        'email': user.email,
        'role': user.role,
    })
    return {'user': user.to_dict(), 'access_token': token}


@auth_bp.post('/login')
def login():
    data = request.json or {}
    require_fields(data, 'email', 'password')
    user = session_service.login(get_session_context(), data['email'], data['password'])
    return _session_payload(user)


@auth_bp.post('/signup')
def signup():
    data = request.json or {}
    require_fields(data, 'name', 'email', 'password', 'confirm_password')
    if data['password'] != data['confirm_password']:
        abort(400, description='Passwords do not match')
    role = validate_choice(data.get('role', ROLE_PHARMACY), ROLES, 'role')
    user = session_service.signup(get_session_context(), data['name'], data['email'], data['password'], role)
    return _session_payload(user), 201


@auth_bp.post('/logout')
@require_session
def logout():
    session_service.logout(get_session_context())
    return {'status': 'logged_out'}


@auth_bp.get('/me')
@require_session
def me():
    return current_user().to_dict()


@auth_bp.post('/forgot-password')
def forgot_password():
    data = request.json or {}
    require_fields(data, 'email')
    session_service.simulate_latency()
    current_app.logger.info('Password reset link requested for %s', data['email'])
    return {'sent': True}
