# services/api/seopages/routes_pages.py

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as OrmSession
from starlette.concurrency import run_in_threadpool

from .audit import log_audit
from .config import settings
from .db import get_db
from .documents import is_allowed_slug, normalize_slug
from .file_store import FileStore
from .page_sync import MalformedInput, PageSync
from .record_store import PersistFailed, RecordStore
from .security import require_roles

LOG = logging.getLogger("seopages.routes")

router = APIRouter(
    prefix="/seo/pages",
    tags=["seo-pages"],
    dependencies=[Depends(require_roles(*settings.SEO_PAGE_ROLES))],
)

# page documents are mutable admin configuration; nothing along the way may cache them
NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

def _no_cache_json(payload: dict, status: int = 200) -> JSONResponse:
    return JSONResponse(payload, status_code=status, headers=NO_CACHE_HEADERS)

def get_page_sync(db: OrmSession = Depends(get_db)) -> PageSync:
    return PageSync(RecordStore(db), FileStore.from_settings())

def _audit_save(db: OrmSession, request: Request, slug: str, saved: dict):
    try:
        log_audit(
            db,
            event_type="seo_page_saved",
            request=request,
            payload={"slug": slug, "updatedAt": saved.get("updatedAt")},
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        LOG.warning("audit write failed for %s", slug, exc_info=True)

@router.get("/{slug}")
def get_page(slug: str, sync: PageSync = Depends(get_page_sync)):
    slug = normalize_slug(slug)
    if not is_allowed_slug(slug):
        return _no_cache_json({"ok": False, "error": "Invalid slug"}, 400)

    try:
        res = sync.resolve(slug)
    except Exception:
        LOG.exception("GET /seo/pages/%s failed", slug)
        return _no_cache_json({"ok": False, "error": "Internal Server Error"}, 500)

    return _no_cache_json({"ok": True, "data": res.document})

@router.post("/{slug}")
async def save_page(
    slug: str,
    request: Request,
    sync: PageSync = Depends(get_page_sync),
    db: OrmSession = Depends(get_db),
):
    slug = normalize_slug(slug)
    if not is_allowed_slug(slug):
        return _no_cache_json({"ok": False, "error": "Invalid slug"}, 400)

    try:
        body = await request.json()
    except ValueError:
        body = None
    incoming = body.get("data") if isinstance(body, dict) else None
    if not isinstance(incoming, dict):
        return _no_cache_json({"ok": False, "error": "Missing `data` object"}, 400)

    try:
        saved = await run_in_threadpool(sync.apply, slug, incoming)
    except MalformedInput as e:
        return _no_cache_json({"ok": False, "error": str(e)}, 400)
    except PersistFailed:
        LOG.exception("POST /seo/pages/%s: record write failed", slug)
        return _no_cache_json({"ok": False, "error": "Failed to save page"}, 500)
    except Exception:
        LOG.exception("POST /seo/pages/%s failed", slug)
        return _no_cache_json({"ok": False, "error": "Internal Server Error"}, 500)

    await run_in_threadpool(_audit_save, db, request, slug, saved)
    return _no_cache_json({"ok": True, "data": saved})
