"""Caller Identity — verifies the identity provider's session token and yields its subject.

Invariants:
    - get_caller_id never raises on a bad token: absent, expired, malformed or wrongly signed
      tokens all resolve to None, and the handler turns None into a 403
    - Token taken from "Authorization: Bearer <jwt>", falling back to the
      provider's "__session" cookie
    - The caller id is the token's "sub" claim, trusted opaquely afterwards

Design Decisions:
    - Verification only, no provider SDK: the provider signs session tokens as
      standard JWTs, PyJWT checks signature, expiry and (optionally) issuer
    - Identity resolved as a non-raising dependency so request-body validation
      still runs first (validate → identify → authorize)
"""

import logging

import jwt
from fastapi import Request

logger = logging.getLogger(__name__)

SESSION_COOKIE = "__session"


class TokenVerifier:
    """Decodes provider-issued session JWTs."""

    def __init__(
        self, key: str, algorithms: list[str], issuer: str | None = None,
    ):
        self.key = key
        self.algorithms = algorithms
        self.issuer = issuer

    def subject(self, token: str) -> str | None:
        """Return the verified `sub` claim of `token`, or None."""
        if not token or not self.key:
            return None
        options = {"require": ["exp", "sub"]}
        try:
            claims = jwt.decode(
                token,
                self.key,
                algorithms=self.algorithms,
                issuer=self.issuer,
                options=options,
            )
        except jwt.ExpiredSignatureError:
            logger.info("Session token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected session token: {e}")
            return None
        return claims.get("sub") or None


def extract_token(request: Request) -> str | None:
    """Bearer token from the Authorization header, else the session cookie."""
    auth = request.headers.get("authorization", "")
    scheme, _, credentials = auth.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(SESSION_COOKIE)


# Singleton (initialized on startup)
token_verifier: TokenVerifier | None = None


def init_identity(key: str, algorithms: list[str], issuer: str | None = None):
    global token_verifier
    token_verifier = TokenVerifier(key, algorithms, issuer)


async def get_caller_id(request: Request) -> str | None:
    """FastAPI dependency: the authenticated caller's id, or None."""
    if not token_verifier:
        raise RuntimeError("Identity verifier not initialized")
    token = extract_token(request)
    if not token:
        return None
    return token_verifier.subject(token)
