import logging
import os
import uuid
from datetime import UTC, datetime, timedelta

import jwt
from sqlalchemy import func
from sqlalchemy.orm import Session

from admin_panel.models.user import User

logger = logging.getLogger(__name__)

# === Config ===
JWT_SECRET = os.environ.get("JWT_SECRET", "change_this_secret")  # run in terminal: openssl rand -hex 32
JWT_ALG = os.environ.get("JWT_ALG", "HS256")
JWT_TTL_SECONDS = int(os.environ.get("JWT_TTL", "86400"))


def create_access_token(user: User, ttl: int | None = None) -> str:
    now = datetime.now(UTC)
    exp = now + timedelta(seconds=(ttl or JWT_TTL_SECONDS))
    payload = {
        "sub": user.username,
        "admin": bool(user.is_admin),
        "ver": user.token_version,  # versioned JWT for stateless revocation
        "iat": int(now.timestamp()),
        "jti": uuid.uuid4().hex,
        "type": "access",
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_jwt(token: str) -> dict | None:
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
    except jwt.ExpiredSignatureError:
        logger.debug("JWT decode failed: token expired")
        return None
    except jwt.InvalidTokenError as exc:
        logger.debug("JWT decode failed: invalid token (%s)", exc)
        return None


def normalize_username(username: str) -> str:
    return (username or "").strip().lower()


def get_user(db: Session, username: str) -> User | None:
    normalized = normalize_username(username)
    if not normalized:
        return None
    return db.query(User).filter(func.lower(User.username) == normalized).one_or_none()
