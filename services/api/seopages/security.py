# services/api/seopages/security.py

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session as OrmSession

from .admin_auth import get_admin_session_from_request, require_csrf_if_cookie, role_allowed
from .db import get_db

def require_roles(*allowed_roles: str):
    """
    FastAPI dependency factory:
      - validates admin session (cookie or Bearer)
      - enforces CSRF for cookie auth on mutating requests
      - checks role membership (SUPER_ADMIN_EMAIL bypasses it)
    An empty allow-list accepts any signed-in admin user.
    """
    def dep(request: Request, db: OrmSession = Depends(get_db)):
        adm_sess, user, is_cookie = get_admin_session_from_request(db, request)
        require_csrf_if_cookie(request, adm_sess, is_cookie)
        if allowed_roles and not role_allowed(user, allowed_roles):
            raise HTTPException(403, "Forbidden")
        # attach for handlers if needed
        request.state.admin_user = user
        request.state.admin_session = adm_sess
        return True
    return dep
