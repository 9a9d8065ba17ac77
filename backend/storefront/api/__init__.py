"""API blueprint package aggregating versioned endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def _join(*segments: str) -> str:
    parts = [segment.strip("/") for segment in segments if segment.strip("/")]
    return "/" + "/".join(parts)


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix shared by all entries, e.g. ``"/api/v1"``.
    entries:
        ``(blueprint, relative_prefix)`` pairs. An empty relative prefix
        mounts the blueprint at ``base_prefix`` itself.
    """

    for bp, rel_prefix in entries:
        app.register_blueprint(bp, url_prefix=_join(base_prefix, rel_prefix))


def init_app(app: Flask) -> None:
    """Mount every API version under ``API_BASE_PREFIX``."""

    from storefront.api import v1

    api_base = app.config.get("API_BASE_PREFIX", "/api")
    for version in (v1,):
        register_blueprint_group(
            app,
            base_prefix=_join(api_base, version.API_VERSION),
            entries=version.REGISTRY,
        )


__all__ = ["init_app", "register_blueprint_group"]
