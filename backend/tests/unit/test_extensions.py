"""Lifecycle of the process-wide database handle."""

from __future__ import annotations

from storefront.core.config import TestingConfig
from storefront.core.extensions import ENGINE_DISPOSED_KEY, dispose_engine
from storefront.factory import create_app


class _IsolatedConfig(TestingConfig):
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "isolated-jwt-secret-key-with-enough-length"
    USE_PROXYFIX = False


class TestDisposeEngine:
    def test_disposes_the_pool_exactly_once(self):
        """
        GIVEN a freshly created application
        WHEN the shutdown hook runs twice (e.g. worker exit plus a manual call)
        THEN only the first call releases the engine pool.
        """
        app = create_app(_IsolatedConfig)

        first = dispose_engine(app)
        second = dispose_engine(app)

        assert (first, second) == (True, False)
        assert app.extensions[ENGINE_DISPOSED_KEY] is True
