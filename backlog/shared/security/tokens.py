"""JWT session tokens.

The identity provider signs HS256 tokens with a shared secret; this
module turns them into a Session and back.
"""

from __future__ import annotations

import time
from typing import Optional

import jwt as pyjwt

from backlog.domain.catalog.entities import Role, Session

DEFAULT_TTL_SECONDS = 3600


def decode_session(
    token: str,
    secret: str,
    algorithm: str = "HS256",
    audience: Optional[str] = None,
) -> Session:
    """Decode and validate a session token.

    Args:
        token: The raw JWT string from the Authorization header.
        secret: Shared signing secret.
        algorithm: Expected signing algorithm.
        audience: Expected ``aud`` claim, or None to skip the check.

    Returns:
        Session built from the ``sub`` and ``role`` claims.

    Raises:
        pyjwt.ExpiredSignatureError: Token has expired.
        pyjwt.InvalidTokenError: Bad signature, malformed token or missing claims.
        ValueError: ``role`` claim is not a known role.
    """
    options = {"require": ["exp", "sub"]}
    if audience is None:
        options["verify_aud"] = False
    payload = pyjwt.decode(
        token,
        secret,
        algorithms=[algorithm],
        audience=audience,
        options=options,
    )
    return Session(user_id=payload["sub"], role=Role(payload.get("role", Role.USER.value)))


def encode_session(
    session: Session,
    secret: str,
    algorithm: str = "HS256",
    audience: Optional[str] = None,
    ttl_seconds: int = DEFAULT_TTL_SECONDS,
) -> str:
    """Issue a token for ``session``. Used by tooling and tests."""
    payload = {
        "sub": session.user_id,
        "role": session.role.value,
        "exp": int(time.time()) + ttl_seconds,
    }
    if audience is not None:
        payload["aud"] = audience
    return pyjwt.encode(payload, secret, algorithm=algorithm)
