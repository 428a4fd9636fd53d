"""Identity token verification."""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from edustocks.core.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

TOKEN_SALT = "edustocks-identity"


@dataclass(frozen=True)
class VerifiedUser:
    """Identity established from a valid token."""

    user_id: str
    email: Optional[str] = None


class TokenVerifier(Protocol):
    """Turns a bearer token into a verified user or raises UnauthenticatedError."""

    def verify(self, token: str) -> VerifiedUser:
        ...


class SignedTokenVerifier:
    """
    Verifies tokens signed with a shared secret.

    Tokens carry `{"uid": ..., "email": ...}` and expire after `max_age_seconds`.
    """

    def __init__(self, secret_key: str, max_age_seconds: int):
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)
        self._max_age_seconds = max_age_seconds

    def issue_token(self, user_id: str, email: Optional[str] = None) -> str:
        return self._serializer.dumps({"uid": user_id, "email": email})

    def verify(self, token: str) -> VerifiedUser:
        if not token or not token.strip():
            raise UnauthenticatedError()
        try:
            data = self._serializer.loads(token.strip(), max_age=self._max_age_seconds)
        except SignatureExpired:
            raise UnauthenticatedError("Unauthorized: token expired")
        except BadSignature:
            logger.debug("Rejected token with bad signature")
            raise UnauthenticatedError("Unauthorized: invalid token")

        if not isinstance(data, dict):
            raise UnauthenticatedError("Unauthorized: invalid token")
        user_id = data.get("uid")
        if not isinstance(user_id, str) or not user_id.strip():
            raise UnauthenticatedError("Unauthorized: token has no user")
        email = data.get("email")
        return VerifiedUser(user_id=user_id, email=email if isinstance(email, str) else None)
