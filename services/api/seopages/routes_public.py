# services/api/seopages/routes_public.py

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from .documents import ensure_document, is_allowed_slug, normalize_slug
from .file_store import FileStore
from .templates import template_for

router = APIRouter(prefix="/public/pages", tags=["public-pages"])

def get_file_store() -> FileStore:
    return FileStore.from_settings()

@router.get("/{slug}")
def public_page(slug: str, files: FileStore = Depends(get_file_store)):
    """
    What the public site renders: the file mirror, or the compiled template
    until the first admin read/save has produced a file. Read-only; never
    seeds or rewrites either store.
    """
    slug = normalize_slug(slug)
    if not is_allowed_slug(slug):
        raise HTTPException(404, "Not found")

    _path, doc = files.load(slug)
    if doc is None:
        doc = template_for(slug)

    return JSONResponse(
        {"ok": True, "data": ensure_document(slug, doc, False)},
        headers={"Cache-Control": "no-store, max-age=0"},
    )
