"""Session resolution: map the incoming request to an authenticated identity.

Identities are issued by an external session provider. The application only
verifies the signed bearer token and reads the email stored as its subject.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask_jwt_extended import create_access_token, get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from daily_journal.domains.journal.errors import Unauthenticated

logger = logging.getLogger(__name__)


def resolve_identity() -> Optional[str]:
    """Return the caller's email, or None when the request carries no valid session."""
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as exc:
        logger.info("Rejected session token: %s", exc)
        return None
    identity = get_jwt_identity()
    if not identity or not isinstance(identity, str):
        return None
    return identity


def require_identity() -> str:
    """Like resolve_identity, but raise Unauthenticated instead of returning None."""
    identity = resolve_identity()
    if not identity:
        raise Unauthenticated()
    return identity


def issue_access_token(email: str) -> str:
    """Mint an access token for the given email (local tooling and tests)."""
    return create_access_token(identity=email)
