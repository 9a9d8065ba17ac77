"""Unit tests for the Werkzeug-backed password hasher."""

from __future__ import annotations

import pytest
from storefront.infra.security.werkzeug_password_hasher import (
    MAX_PASSWORD_LENGTH,
    WerkzeugPasswordHasher,
)
from storefront.services._shared.errors import EncodingError


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


class TestWerkzeugPasswordHasher:
    def test_hash_is_salted_and_verifiable(self, hasher):
        """Two hashes of the same password differ but both verify."""
        first = hasher.hash("s3cret-pass")
        second = hasher.hash("s3cret-pass")

        assert first != second
        assert first.startswith("pbkdf2:sha256:1000$")
        assert hasher.verify(first, "s3cret-pass")
        assert hasher.verify(second, "s3cret-pass")

    def test_wrong_password_is_not_an_error(self, hasher):
        stored = hasher.hash("right-password")

        assert hasher.verify(stored, "wrong-password") is False

    def test_oversized_plaintext_never_matches(self, hasher):
        stored = hasher.hash("right-password")

        assert hasher.verify(stored, "x" * (MAX_PASSWORD_LENGTH + 1)) is False

    @pytest.mark.parametrize("stored", ["", "plain-text", "pbkdf2:sha256$only-one"])
    def test_malformed_hash_raises_encoding_error(self, hasher, stored):
        with pytest.raises(EncodingError):
            hasher.verify(stored, "anything")

    def test_unknown_method_in_stored_hash_raises_encoding_error(self, hasher):
        with pytest.raises(EncodingError):
            hasher.verify("bogus$salt$digest", "anything")

    def test_hash_rejects_unsupported_input(self, hasher):
        with pytest.raises(EncodingError):
            hasher.hash(None)  # type: ignore[arg-type]
        with pytest.raises(EncodingError):
            hasher.hash("x" * (MAX_PASSWORD_LENGTH + 1))

    def test_unknown_method_raises_encoding_error_without_plaintext(self):
        with pytest.raises(EncodingError) as excinfo:
            WerkzeugPasswordHasher(method="bogus").hash("do-not-echo-me")

        assert "do-not-echo-me" not in str(excinfo.value)

    def test_from_config_reads_app_setting(self, app):
        with app.app_context():
            hasher = WerkzeugPasswordHasher.from_config()

        assert hasher.method == app.config["PASSWORD_HASH_METHOD"]
