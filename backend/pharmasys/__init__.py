from flask import Flask
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, scoped_session
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

load_dotenv()

db_engine = None
SessionLocal = None
jwt = JWTManager()


def create_app(config: Optional[Dict[str, Any]] = None):
    global db_engine, SessionLocal
    app = Flask(__name__)

    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY', 'dev-secret-change-me-before-deploying')
    app.config['DATABASE_URL'] = os.getenv('DATABASE_URL', 'sqlite:///pharmasys.db')
    app.config['AUTH_DELAY_SECONDS'] = float(os.getenv('AUTH_DELAY_SECONDS', '0.5'))
    app.config['SEED_FIXTURES'] = os.getenv('SEED_FIXTURES', '1') != '0'
    app.config['PHARMACY_CREDIT_LIMIT'] = float(os.getenv('PHARMACY_CREDIT_LIMIT', '10000'))

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    # Session store database (holds the single persisted session record)
    db_url = app.config['DATABASE_URL']
    if db_url.endswith(':memory:'):
        # Ensure a single shared in-memory SQLite database across all sessions
        db_engine = create_engine(
            db_url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_engine = create_engine(db_url, echo=False, future=True)
    SessionLocal = scoped_session(sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False))

    from .models.session_store import Base
    Base.metadata.create_all(db_engine)

    jwt.init_app(app)
    _register_jwt_errors()

    # In-memory record stores, seeded once per process
    from .fixtures import build_stores
    from .services.store import Stores
    app.extensions['pharmasys.stores'] = build_stores() if app.config['SEED_FIXTURES'] else Stores()

    # Session context restored from the persisted record
    from .services.session import SessionContext
    ctx = SessionContext()
    with app.app_context():
        ctx.restore()
    app.extensions['pharmasys.session'] = ctx

    from .routes.auth import auth_bp
    from .routes.navigation import nav_bp
    from .routes.dashboard import dash_bp
    from .routes.inventory import inv_bp
    from .routes.suppliers import suppliers_bp
    from .routes.purchases import po_bp
    from .routes.pharmacies import pharmacies_bp
    from .routes.sales import sales_bp
    from .routes.sales_returns import returns_bp
    from .routes.payments import payments_bp
    from .routes.reports import rpt_bp
    from .routes.audit_logs import audit_bp
    from .routes.settings import settings_bp
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(nav_bp)
    app.register_blueprint(dash_bp)
    app.register_blueprint(inv_bp, url_prefix='/inventory')
    app.register_blueprint(suppliers_bp, url_prefix='/suppliers')
    app.register_blueprint(po_bp, url_prefix='/purchases')
    app.register_blueprint(pharmacies_bp, url_prefix='/pharmacies')
    app.register_blueprint(sales_bp, url_prefix='/sales')
    app.register_blueprint(returns_bp, url_prefix='/sales-returns')
    app.register_blueprint(payments_bp, url_prefix='/payments')
    app.register_blueprint(rpt_bp, url_prefix='/reports')
    app.register_blueprint(audit_bp, url_prefix='/audit-logs')
    app.register_blueprint(settings_bp, url_prefix='/settings')

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            return error_payload(e.code, e.name, e.description), e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return error_payload(500, 'Internal Server Error', 'Unexpected error'), 500

    return app


def error_payload(status: int, title: str, detail: str) -> Dict[str, Any]:
    return {
        'error': {
            'status': status,
            'title': title,
            'detail': detail,
        }
    }


def _register_jwt_errors():
    # flask-jwt-extended answers with {'msg': ...}; keep every 401 in the common shape
    @jwt.unauthorized_loader
    def _missing_token(reason):
        return error_payload(401, 'Unauthorized', 'Login required'), 401

    @jwt.invalid_token_loader
    def _invalid_token(reason):
        return error_payload(401, 'Unauthorized', f'Invalid session token: {reason}'), 401

    @jwt.expired_token_loader
    def _expired_token(jwt_header, jwt_payload):
        return error_payload(401, 'Unauthorized', 'Session token expired'), 401


def get_db():
    return SessionLocal()


def get_stores():
    from flask import current_app
    return current_app.extensions['pharmasys.stores']


def get_session_context():
    from flask import current_app
    return current_app.extensions['pharmasys.session']
