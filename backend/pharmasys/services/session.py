from __future__ import annotations
"""Mock sign-in flow and the single persisted session record.

No credentials are verified: login derives the role from the email address and
signup trusts the submitted role. Both pause for ``AUTH_DELAY_SECONDS`` before
answering, mirroring the latency of a real identity service.
"""
import secrets
import string
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import select

from pharmasys import get_db
from pharmasys.constants.navigation import ROLE_ADMIN, ROLE_PROCUREMENT, ROLE_SALES, ROLE_INVENTORY, ROLE_PHARMACY
from pharmasys.models.session_store import KeyValue

SESSION_KEY = 'pharmacy_user'
# Checked in this order; first substring found in the email wins
EMAIL_ROLE_HINTS = (ROLE_PROCUREMENT, ROLE_SALES, ROLE_INVENTORY, ROLE_PHARMACY)
_ID_ALPHABET = string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: str
    email: str
    role: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SessionUser':
        return cls(id=str(data['id']), name=data['name'], email=data['email'], role=data['role'])


class SessionStore:
    """Reads and writes the session record under the fixed ``SESSION_KEY``."""

    def __init__(self, key: str = SESSION_KEY):
        self.key = key

    def read(self) -> Optional[SessionUser]:
        session = get_db()
        row = session.execute(select(KeyValue).where(KeyValue.key == self.key)).scalar_one_or_none()
        if row is None:
            return None
        try:
            return SessionUser.from_dict(row.value)
        except (KeyError, TypeError):
            current_app.logger.warning('Discarding malformed session record')
            return None

    def write(self, user: SessionUser) -> None:
        session = get_db()
        row = session.get(KeyValue, self.key)
        if row is None:
            session.add(KeyValue(key=self.key, value=user.to_dict()))
        else:
            row.value = user.to_dict()
        session.commit()

    def clear(self) -> None:
        session = get_db()
        row = session.get(KeyValue, self.key)
        if row is not None:
            session.delete(row)
            session.commit()


class SessionContext:
    """Current signed-in user of the application.

    Created at startup and restored from the store; populated by login/signup,
    cleared by logout. Pages only read it.
    """

    def __init__(self, store: Optional[SessionStore] = None):
        self.store = store or SessionStore()
        self._user: Optional[SessionUser] = None

    @property
    def user(self) -> Optional[SessionUser]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def restore(self) -> Optional[SessionUser]:
        self._user = self.store.read()
        return self._user

    def populate(self, user: SessionUser) -> SessionUser:
        self._user = user
        self.store.write(user)
        return user

    def clear(self) -> None:
        self._user = None
        self.store.clear()


def role_for_email(email: str) -> str:
    for role in EMAIL_ROLE_HINTS:
        if role in email:
            return role
    return ROLE_ADMIN


def new_session_id() -> str:
    return ''.join(secrets.choice(_ID_ALPHABET) for _ in range(9))


def simulate_latency() -> None:
    delay = current_app.config.get('AUTH_DELAY_SECONDS', 0)
    if delay:
        time.sleep(delay)


def login(ctx: SessionContext, email: str, password: str) -> SessionUser:
    simulate_latency()
    user = SessionUser(id=new_session_id(), name=email.split('@')[0], email=email, role=role_for_email(email))
    current_app.logger.info('Login for %s as %s', email, user.role)
    return ctx.populate(user)


def signup(ctx: SessionContext, name: str, email: str, password: str, role: str) -> SessionUser:
    simulate_latency()
    user = SessionUser(id=new_session_id(), name=name, email=email, role=role)
    current_app.logger.info('Signup for %s as %s', email, role)
    return ctx.populate(user)


def logout(ctx: SessionContext) -> None:
    if ctx.user:
        current_app.logger.info('Logout for %s', ctx.user.email)
    ctx.clear()

__all__ = ['SESSION_KEY', 'SessionUser', 'SessionStore', 'SessionContext', 'role_for_email', 'login', 'signup', 'logout']
