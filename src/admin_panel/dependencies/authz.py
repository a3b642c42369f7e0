from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from admin_panel.context import PanelContext
from admin_panel.db import get_db
from admin_panel.models.user import User as DBUser
from admin_panel.utils.auth import decode_jwt, get_user

bearer = HTTPBearer(auto_error=False)


# Module-level dependency object to avoid calling Depends() in function defaults
bearer_dep = Depends(bearer)
db_dep = Depends(get_db)


def _user_from_credentials(cred: HTTPAuthorizationCredentials, db: Session) -> DBUser:
    # Strip a literal "Bearer " pasted into the credential value
    token = cred.credentials
    if isinstance(token, str) and token.lower().startswith("bearer "):
        token = token.split(" ", 1)[1]

    payload = decode_jwt(token)
    if not payload or payload.get("type") != "access":
        raise HTTPException(401, "invalid or expired token", headers={"WWW-Authenticate": "Bearer"})

    user = get_user(db, payload.get("sub"))
    if not user or not user.is_active:
        raise HTTPException(401, "user not found or inactive")

    if payload.get("ver") != user.token_version:
        raise HTTPException(401, "token no longer valid (revoked)")

    return user


def get_current_user(
    cred: HTTPAuthorizationCredentials = bearer_dep,
    db: Session = db_dep,
) -> DBUser:
    if cred is None or cred.scheme.lower() != "bearer":
        raise HTTPException(401, "missing or invalid authorization header", headers={"WWW-Authenticate": "Bearer"})
    return _user_from_credentials(cred, db)


def get_optional_user(
    cred: HTTPAuthorizationCredentials = bearer_dep,
    db: Session = db_dep,
) -> DBUser | None:
    """Like get_current_user, but a request without credentials is a guest (None)."""
    if cred is None:
        return None
    if cred.scheme.lower() != "bearer":
        raise HTTPException(401, "missing or invalid authorization header", headers={"WWW-Authenticate": "Bearer"})
    return _user_from_credentials(cred, db)


# Module-level dependency objects to avoid calling Depends() in function defaults
current_user_dependency = Depends(get_current_user)
optional_user_dependency = Depends(get_optional_user)


def require_admin(user: DBUser = current_user_dependency) -> DBUser:
    if not user.is_admin:
        raise HTTPException(403, "admin privileges required")
    return user


def get_panel_context(request: Request, user: DBUser | None = optional_user_dependency) -> PanelContext:
    return PanelContext.from_request(request, user)
