"""
Authentication utilities.

Bearer tokens are JWTs issued by the external identity provider. They are
verified here with PyJWT against the configured key, issuer and audience;
the subject claim becomes the request's user id.
"""

from __future__ import annotations

import time
from typing import Any

import jwt
from fastapi import Header

from ranch_shared.config.settings import settings
from ranch_shared.config.logging import auth_logger as logger, mask_user_id
from ranch_shared.utils.exceptions import UnauthorizedError


# Claims that may carry the user id, in order of preference
SUBJECT_CLAIMS = ("sub", "uid", "user_id")


def sign_jwt(
    payload: dict[str, Any],
    ttl_seconds: int = 3600,
) -> str:
    """
    Sign a token with the local secret.

    The identity provider issues production tokens; this is used by tests
    and by the CLI to mint development tokens.
    """
    now = int(time.time())
    data = {**payload, "iat": now, "exp": now + ttl_seconds}
    if settings.auth_issuer:
        data.setdefault("iss", settings.auth_issuer)
    if settings.auth_audience:
        data.setdefault("aud", settings.auth_audience)
    return jwt.encode(data, settings.auth_jwt_secret, algorithm=settings.jwt_algorithms[0])


def verify_identity_token(token: str) -> dict[str, Any]:
    """
    Verify and decode an identity token.

    Returns:
        Decoded token claims.

    Raises:
        UnauthorizedError: If token is invalid, expired, or has no subject.
    """
    options = {
        "require": ["exp"],
        "verify_aud": bool(settings.auth_audience),
        "verify_iss": bool(settings.auth_issuer),
    }
    try:
        payload = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=settings.jwt_algorithms,
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError as e:
        # Log the real reason, return a generic message to the client
        logger.warning("JWT validation failed", error=str(e))
        raise UnauthorizedError("Invalid token")

    if not extract_user_id(payload):
        raise UnauthorizedError("Invalid token: missing subject claim")

    return payload


def extract_user_id(claims: dict[str, Any]) -> str | None:
    for claim in SUBJECT_CLAIMS:
        value = claims.get(claim)
        if value not in (None, ""):
            return str(value)
    return None


def get_bearer_token(authorization: str | None) -> str:
    """
    Extract bearer token from Authorization header.

    Raises:
        UnauthorizedError: If header is missing or malformed.
    """
    if not authorization:
        raise UnauthorizedError("Missing Authorization header")
    if not authorization.startswith("Bearer "):
        raise UnauthorizedError("Invalid Authorization header format. Expected: Bearer <token>")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise UnauthorizedError("Missing bearer token")
    return token


def current_user_context(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> dict[str, Any]:
    """
    FastAPI dependency to get the current user context from the bearer token.

    Usage:
        @router.get("/animals")
        def list_animals(ctx = Depends(current_user_context)):
            user_id = ctx["user_id"]

    Returns:
        Dict with: user_id, email, first_name, last_name, profile_image_url, claims
    """
    token = get_bearer_token(authorization)
    claims = verify_identity_token(token)
    user_id = extract_user_id(claims)

    logger.debug("Authenticated request", user_id=mask_user_id(user_id))

    return {
        "user_id": user_id,
        "email": claims.get("email"),
        "first_name": claims.get("first_name") or claims.get("given_name"),
        "last_name": claims.get("last_name") or claims.get("family_name"),
        "profile_image_url": claims.get("picture") or claims.get("profile_image_url"),
        "claims": claims,
    }
