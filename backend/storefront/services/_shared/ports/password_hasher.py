from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """
    Port for one-way password hashing.

    ``hash`` produces a salted digest with an adaptive cost; ``verify``
    compares in constant time. Both raise
    :class:`~storefront.services._shared.errors.EncodingError` when the input
    cannot be processed; a wrong password is ``False``, never an error.
    """

    def hash(self, plaintext: str) -> str: ...
    def verify(self, password_hash: str, plaintext: str) -> bool: ...
