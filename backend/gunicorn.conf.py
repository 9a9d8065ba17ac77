# Application (run from backend/: gunicorn -c gunicorn.conf.py)
wsgi_app = "storefront:create_app()"

# Bind & workers
bind = "0.0.0.0:8000"
workers = 2  # override con env GUNICORN_WORKERS
threads = 1
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs a stdout/stderr (colectables por Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"  # override con env LOG_LEVEL

# Respeto de cabeceras de proxy
forwarded_allow_ips = "*"
proxy_protocol = False


def worker_exit(server, worker):
    """Release the worker's pooled database connections exactly once."""
    app = getattr(worker, "wsgi", None)
    if app is None or not hasattr(app, "extensions"):
        return
    from storefront.core.extensions import dispose_engine

    dispose_engine(app)
