"""Credential Primitives: bcrypt password hashing and HS256 access tokens.

Invariants:
    - Stored passwords are bcrypt hashes; verify_password never raises on malformed hashes
    - Tokens carry sub (user id), role and exp; decode_access_token rejects anything else
"""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from gastromed.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash (e.g. a legacy plaintext row)
        return False


def create_access_token(
    user_id: str, role: str, secret_key: str, expires_minutes: int,
) -> str:
    payload = {
        "sub": user_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> dict:
    try:
        payload = jwt.decode(
            token, secret_key, algorithms=[ALGORITHM],
            options={"require": ["sub", "role", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid token")
    return payload
