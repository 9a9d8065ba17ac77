"""Trust ``X-Forwarded-*`` headers from a configured number of proxies."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Wrap the WSGI app in :class:`~werkzeug.middleware.proxy_fix.ProxyFix`.

    Enabled by ``USE_PROXYFIX`` (default ``True``). ``PROXYFIX_HOPS`` sets how
    many upstream proxies are trusted (default ``1``); ``0`` disables it.
    """
    hops = int(app.config.get("PROXYFIX_HOPS", 1))
    if not app.config.get("USE_PROXYFIX", True) or hops <= 0:
        return
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops, x_prefix=hops)
