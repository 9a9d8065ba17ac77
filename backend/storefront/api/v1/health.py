"""Liveness endpoint reporting store connectivity."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app
from sqlalchemy import text

from storefront.api.deps import json_response, timing
from storefront.core.extensions import db
from storefront.repositories.base import translate_db_errors
from storefront.services._shared.errors import StoreUnavailableError

bp = Blueprint("health", __name__)

log = logging.getLogger(__name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return ``200`` when the store answers ``SELECT 1``, ``503`` otherwise."""

    try:
        with translate_db_errors("Health"):
            db.session.execute(text("SELECT 1"))
        store = "ok"
    except StoreUnavailableError:
        log.warning("healthcheck.store_unavailable", exc_info=True)
        db.session.rollback()
        store = "unavailable"
    payload = {
        "status": "ok" if store == "ok" else "degraded",
        "store": store,
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload, status=200 if store == "ok" else 503)
