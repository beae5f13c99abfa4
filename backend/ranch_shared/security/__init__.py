"""
Security module: identity token verification and rate limiting.
"""

from ranch_shared.security.auth import (
    sign_jwt,
    verify_identity_token,
    extract_user_id,
    get_bearer_token,
    current_user_context,
)
from ranch_shared.security.rate_limit import (
    limiter,
    rate_limit_exceeded_handler,
)

__all__ = [
    # auth
    "sign_jwt",
    "verify_identity_token",
    "extract_user_id",
    "get_bearer_token",
    "current_user_context",
    # rate limiting
    "limiter",
    "rate_limit_exceeded_handler",
]
