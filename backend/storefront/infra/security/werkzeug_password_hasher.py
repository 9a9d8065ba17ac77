# storefront/infra/security/werkzeug_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from flask import current_app, has_app_context
from werkzeug.security import check_password_hash, generate_password_hash

from storefront.services._shared.errors import EncodingError
from storefront.services._shared.ports import PasswordHasher

DEFAULT_METHOD = "scrypt"
MAX_PASSWORD_LENGTH = 4096


@dataclass(slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Adapter over :mod:`werkzeug.security`.

    Hashes look like ``method$salt$digest``; the salt is random per call and
    the cost factor is part of ``method`` (``scrypt`` by default). Comparison
    goes through :func:`hmac.compare_digest` inside Werkzeug.
    """

    method: str = DEFAULT_METHOD
    salt_length: int = 16

    @classmethod
    def from_config(cls) -> WerkzeugPasswordHasher:
        """Build a hasher from ``PASSWORD_HASH_METHOD`` when an app is active."""
        if has_app_context():
            return cls(method=current_app.config.get("PASSWORD_HASH_METHOD", DEFAULT_METHOD))
        return cls()

    def hash(self, plaintext: str) -> str:
        if not isinstance(plaintext, str):
            raise EncodingError("Password must be a string.")
        if len(plaintext) > MAX_PASSWORD_LENGTH:
            raise EncodingError("Password exceeds the supported length.")
        try:
            return generate_password_hash(
                plaintext, method=self.method, salt_length=self.salt_length
            )
        except (ValueError, TypeError, UnicodeError) as exc:
            raise EncodingError("Password could not be hashed.") from exc

    def verify(self, password_hash: str, plaintext: str) -> bool:
        if not isinstance(password_hash, str) or password_hash.count("$") < 2:
            raise EncodingError("Stored password hash is malformed.")
        if not isinstance(plaintext, str) or len(plaintext) > MAX_PASSWORD_LENGTH:
            return False
        try:
            # ``check_password_hash`` is untyped; coerce to bool for mypy.
            return bool(check_password_hash(password_hash, plaintext))
        except (ValueError, TypeError, UnicodeError) as exc:
            raise EncodingError("Stored password hash is malformed.") from exc
