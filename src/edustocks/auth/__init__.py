"""Authentication package."""

from edustocks.auth.token_verifier import (
    VerifiedUser,
    TokenVerifier,
    SignedTokenVerifier,
)

__all__ = [
    "VerifiedUser",
    "TokenVerifier",
    "SignedTokenVerifier",
]
