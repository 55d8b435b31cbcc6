# services/api/seopages/record_store.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as OrmSession

from . import models
from .documents import normalize_document

LOG = logging.getLogger("seopages.records")

class PageStoreError(Exception):
    """Base for record store failures."""

class StoreUnavailable(PageStoreError):
    """Read/connect failure; readers fall back to the file store or template."""

class PersistFailed(PageStoreError):
    """Write failure; fatal for the request that tried to save."""


_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

class RecordStore:
    """
    Relational side of a page document: one seo_pages row per slug.

    Every call is a single statement plus commit; there is no locking here,
    concurrent saves resolve last-write-wins inside the database upsert.
    """

    def __init__(self, db: OrmSession):
        self.db = db

    def load(self, slug: str) -> Optional[dict]:
        try:
            # upserts bypass the ORM, so never trust an already-loaded instance
            stmt = select(models.SeoPage).where(models.SeoPage.slug == slug).execution_options(populate_existing=True)
            row = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreUnavailable(f"record read failed for {slug}") from e
        if row is None:
            return None
        return normalize_document(row.data, slug)

    def save(self, slug: str, doc: dict) -> dict:
        now = _now()
        try:
            insert = _UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
            if insert is not None:
                stmt = insert(models.SeoPage).values(slug=slug, data=doc, created_at=now, updated_at=now)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[models.SeoPage.slug],
                    set_={"data": stmt.excluded.data, "updated_at": stmt.excluded.updated_at},
                )
                self.db.execute(stmt)
            else:
                # no native upsert: merge is get-or-create on the primary key
                self.db.merge(models.SeoPage(slug=slug, data=doc, updated_at=now))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistFailed(f"record write failed for {slug}") from e
        LOG.debug("record saved slug=%s updatedAt=%s", slug, doc.get("updatedAt"))
        return doc
