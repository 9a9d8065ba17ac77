"""Authentication helpers for tests."""

from __future__ import annotations

from datetime import timedelta
from uuid import UUID

from flask_jwt_extended import create_access_token
from storefront.api.deps import CUSTOMER_ROLE, ROLE_CLAIM


def issue_token(
    account_id: UUID,
    email: str,
    role: str = CUSTOMER_ROLE,
    expires_delta: timedelta | None = None,
) -> str:
    """Generate an access token shaped like the one issued at login."""

    return create_access_token(
        identity=str(account_id),
        additional_claims={"email": email, ROLE_CLAIM: role},
        expires_delta=expires_delta,
    )


def auth_header(account_id: UUID, email: str, role: str = CUSTOMER_ROLE) -> dict[str, str]:
    return {"Authorization": f"Bearer {issue_token(account_id, email, role)}"}
