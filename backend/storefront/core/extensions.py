"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

LOGGER = logging.getLogger(__name__)

#: ``app.extensions`` flag set once the engine pool has been released.
ENGINE_DISPOSED_KEY = "storefront.engine_disposed"

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Process-wide singletons (import-safe, bound to an app in init_app)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)
jwt = JWTManager()


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations, and JWT extensions.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`storefront.models` package to ensure SQLAlchemy metadata is ready
        for migrations.
    """
    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from storefront import models as _models  # noqa: F401

    migrate.init_app(app, db)

    app.config.setdefault(
        "JWT_ACCESS_TOKEN_EXPIRES",
        timedelta(minutes=float(app.config.get("JWT_ACCESS_TOKEN_EXPIRES_MINUTES", 60))),
    )
    jwt.init_app(app)


def dispose_engine(app: Flask) -> bool:
    """Release every pooled connection held by the application's engine.

    Called from gunicorn's ``worker_exit`` hook. Later calls for the same app
    are no-ops.

    :returns: ``True`` when this call released the pool.
    """
    if app.extensions.get(ENGINE_DISPOSED_KEY):
        return False
    app.extensions[ENGINE_DISPOSED_KEY] = True
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    LOGGER.info("db.engine.disposed")
    return True
