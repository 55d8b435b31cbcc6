# services/api/seopages/admin_auth.py

from __future__ import annotations

import secrets
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Tuple

from fastapi import HTTPException, Request, Response
from passlib.context import CryptContext
from sqlalchemy.orm import Session as OrmSession

from .config import settings
from . import models

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALL_ROLES = ("admin", "editor", "seo_manager", "content_writer", "developer")

def hash_password(pw: str) -> str:
    return pwd.hash(pw)

def verify_password(pw: str, pw_hash: str) -> bool:
    try:
        return pwd.verify(pw, pw_hash)
    except (ValueError, TypeError):
        return False

def parse_role(value: object) -> Optional[str]:
    """Accepts 'SEO Manager', 'seo-manager', 'SEO_MANAGER', ... ; None if unknown."""
    if not isinstance(value, str):
        return None
    norm = value.strip().lower().replace("-", "_").replace(" ", "_")
    return norm if norm in ALL_ROLES else None

def is_super_admin(user: models.AdminUser) -> bool:
    return bool(settings.SUPER_ADMIN_EMAIL) and user.email == str(settings.SUPER_ADMIN_EMAIL).lower()

def role_allowed(user: models.AdminUser, allowed: Iterable[str]) -> bool:
    if is_super_admin(user):
        return True
    return parse_role(user.role) in {parse_role(r) for r in allowed}

def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

def _new_token(prefix: str) -> str:
    return f"{prefix}_{secrets.token_urlsafe(32)}"

# --------------------------
# Admin sessions (server-side)
# --------------------------

def create_admin_session(db: OrmSession, *, user: models.AdminUser, request: Request) -> models.AdminSession:
    ttl = int(settings.ADMIN_SESSION_TTL_MIN)
    s = models.AdminSession(
        token=_new_token("adm"),
        user_id=user.id,
        created_at=_now(),
        expires_at=_now() + timedelta(minutes=ttl),
        revoked_at=None,
        csrf_token=_new_token("csrf"),
        ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    db.add(s)
    return s

def set_admin_cookie(response: Response, token: str):
    response.set_cookie(
        key=settings.ADMIN_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=bool(settings.ADMIN_COOKIE_SECURE),
        samesite=settings.ADMIN_COOKIE_SAMESITE,
        domain=settings.ADMIN_COOKIE_DOMAIN,
        path="/",
        max_age=int(settings.ADMIN_SESSION_TTL_MIN) * 60,
    )

def clear_admin_cookie(response: Response):
    response.delete_cookie(
        key=settings.ADMIN_COOKIE_NAME,
        domain=settings.ADMIN_COOKIE_DOMAIN,
        path="/",
    )

def get_admin_session_from_request(db: OrmSession, request: Request) -> Tuple[models.AdminSession, models.AdminUser, bool]:
    """
    Returns (admin_session, user, is_cookie_auth).
    Cookie auth uses CSRF on state-changing requests.
    """
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        is_cookie = False
    else:
        token = request.cookies.get(settings.ADMIN_COOKIE_NAME)
        is_cookie = True

    if not token:
        raise HTTPException(401, "Unauthorized")

    s = db.query(models.AdminSession).filter(models.AdminSession.token == token).first()
    if not s or s.revoked_at is not None:
        raise HTTPException(401, "Invalid admin session")

    if s.expires_at < _now():
        raise HTTPException(401, "Admin session expired")

    u = db.get(models.AdminUser, s.user_id)
    if not u or not u.is_active:
        raise HTTPException(401, "Admin user inactive")

    return s, u, is_cookie

def require_csrf_if_cookie(request: Request, admin_session: models.AdminSession, is_cookie_auth: bool):
    if not is_cookie_auth:
        return
    if request.method.upper() in ("POST", "PUT", "PATCH", "DELETE"):
        csrf = request.headers.get("x-csrf-token")
        if not csrf or csrf != admin_session.csrf_token:
            raise HTTPException(403, "CSRF token missing/invalid")
