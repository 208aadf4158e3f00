from functools import wraps
from flask import abort
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from pharmasys import get_session_context


def require_session(fn):
    """Reject the request with 401 unless the bearer token belongs to the live session."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        ctx = get_session_context()
        if not ctx.is_authenticated or ctx.user.id != get_jwt_identity():
            abort(401, description='Session expired')
        return fn(*args, **kwargs)
    return wrapper


def current_user():
    return get_session_context().user
