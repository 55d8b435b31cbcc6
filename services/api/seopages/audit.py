# services/api/seopages/audit.py

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import Request
from sqlalchemy.orm import Session as OrmSession

from . import models

def _safe_json(payload: Any) -> str | None:
    if payload is None:
        return None
    try:
        return json.dumps(payload, ensure_ascii=False)
    except (TypeError, ValueError):
        return json.dumps({"_unserializable": True, "repr": repr(payload)}, ensure_ascii=False)

def log_audit(
    db: OrmSession,
    *,
    event_type: str,
    request: Request | None,
    payload: Dict[str, Any] | None = None,
):
    """
    Adds an audit row to the session (caller commits):
      - admin identity if the role guard attached one
      - path/method/ip/request_id
      - payload_json stores structured details (never page bodies)
    """
    admin_user = None
    request_id = None
    client_ip = None
    path = None
    method = None

    if request is not None:
        admin_user = getattr(request.state, "admin_user", None)
        request_id = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
        client_ip = request.client.host if request.client else None
        path = request.url.path
        method = request.method

    ae = models.AuditEvent(
        created_at=datetime.now(timezone.utc).replace(tzinfo=None),
        event_type=event_type,
        request_id=request_id,
        client_ip=client_ip,
        path=path,
        method=method,
        admin_user_id=getattr(admin_user, "id", None),
        admin_email=getattr(admin_user, "email", None),
        payload_json=_safe_json(payload),
    )
    db.add(ae)
