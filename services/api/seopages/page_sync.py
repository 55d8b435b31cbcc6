# services/api/seopages/page_sync.py
"""
Keeps a page document consistent between the record store (admin source of
truth) and the JSON file mirror (what the public site reads).

Read rules, per slug:

  1. no record            -> seed it from the file (if it has content) or the
                             template; write the file once if it is missing
  2. legal page, record   -> upgrade the record from the fuller of
     has <= 1 section        file/template, advancing updatedAt
     but file/template
     has >= 2
  3. anything else        -> record wins; mirror it to disk if no file exists

Reads only advance updatedAt in case 2. A watcher that redeploys on file
changes would otherwise re-trigger itself through GET forever. Case 2 cannot
fire twice: after an upgrade the record has two or more sections.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from .documents import (
    count_sections,
    ensure_document,
    has_content,
    is_section_bearing,
    next_revision,
    normalize_document,
)
from .file_store import FileStore
from .record_store import PersistFailed, RecordStore, StoreUnavailable
from .templates import template_for

LOG = logging.getLogger("seopages.sync")

SEEDED_FROM_TEMPLATE = "seeded_from_template"
SEEDED_FROM_FILE = "seeded_from_file"
UPGRADED = "upgraded"
RECORD = "record"
FALLBACK = "fallback"  # record store unreachable or rejected the write; nothing persisted

class MalformedInput(ValueError):
    pass

@dataclass
class Resolution:
    document: dict
    source: str
    wrote_file: bool = False

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class PageSync:
    def __init__(self, records: RecordStore, files: FileStore, clock: Callable[[], datetime] = _utcnow):
        self.records = records
        self.files = files
        self.clock = clock

    # --------------------------
    # helpers
    # --------------------------

    def _mirror(self, slug: str, path: Path, doc: dict, reason: str) -> bool:
        try:
            self.files.atomic_write(path, doc)
            return True
        except OSError as e:
            # record store stays authoritative; the next read retries the mirror
            LOG.warning("mirror write failed slug=%s reason=%s path=%s: %s", slug, reason, path, e)
            return False

    def _persist(self, slug: str, doc: dict, reason: str) -> bool:
        # read-time writes are best effort; the request still gets the document
        try:
            self.records.save(slug, doc)
            return True
        except PersistFailed:
            LOG.warning("record write failed slug=%s reason=%s", slug, reason, exc_info=True)
            return False

    def _revision_after(self, prior: Any) -> str:
        return next_revision(prior, self.clock())

    # --------------------------
    # read path
    # --------------------------

    def resolve(self, slug: str) -> Resolution:
        existing_path, file_raw = self.files.load(slug)
        file_path = existing_path or self.files.default_path(slug)
        file_doc = ensure_document(slug, file_raw, False) if file_raw is not None else None
        template_doc = ensure_document(slug, template_for(slug), False)

        record_available = True
        try:
            record_raw = self.records.load(slug)
        except StoreUnavailable:
            LOG.warning("record store unavailable for %s; serving file/template", slug, exc_info=True)
            record_raw = None
            record_available = False

        if record_raw is None:
            if file_doc is not None and file_doc.get("content"):
                seed, source = file_doc, SEEDED_FROM_FILE
            else:
                seed, source = template_doc, SEEDED_FROM_TEMPLATE

            if not record_available or not self._persist(slug, seed, "seed"):
                source = FALLBACK

            wrote = False
            if existing_path is None:
                wrote = self._mirror(slug, file_path, seed, "seed")
            LOG.info("page %s resolved source=%s wrote_file=%s", slug, source, wrote)
            return Resolution(seed, source, wrote)

        record_doc = ensure_document(slug, record_raw, False) if has_content(record_raw) else None

        if record_doc is not None and is_section_bearing(slug):
            record_secs = count_sections(record_doc)
            file_secs = count_sections(file_doc) if file_doc is not None else 0
            template_secs = count_sections(template_doc)

            if record_secs <= 1 and max(file_secs, template_secs) >= 2:
                best = file_doc if file_doc is not None and file_secs >= template_secs else template_doc
                upgraded = ensure_document(slug, best, True, now=self._revision_after(record_doc.get("updatedAt")))
                source = UPGRADED if self._persist(slug, upgraded, "upgrade") else FALLBACK

                wrote = False
                if existing_path is None:
                    wrote = self._mirror(slug, file_path, upgraded, "upgrade")
                LOG.info(
                    "page %s upgraded from %s (%d -> %d sections)",
                    slug, "file" if best is file_doc else "template", record_secs, count_sections(upgraded),
                )
                return Resolution(upgraded, source, wrote)

        wrote = False
        if existing_path is None and record_doc is not None:
            wrote = self._mirror(slug, file_path, record_doc, "record")

        return Resolution(ensure_document(slug, record_raw, False), RECORD, wrote)

    # --------------------------
    # write path
    # --------------------------

    def apply(self, slug: str, incoming: Any) -> dict:
        """
        Save an admin edit. Always advances updatedAt, even when the content
        is unchanged. PersistFailed propagates; mirror failures do not.
        """
        if not isinstance(incoming, dict):
            raise MalformedInput("page data must be an object")

        try:
            current = self.records.load(slug)
        except StoreUnavailable:
            LOG.warning("record store unavailable before save of %s", slug, exc_info=True)
            current = None
        prior = current.get("updatedAt") if isinstance(current, dict) else None

        doc = ensure_document(slug, normalize_document(incoming, slug), True, now=self._revision_after(prior))
        saved = self.records.save(slug, doc)

        self._mirror(slug, self.files.path_for(slug), saved, "save")
        LOG.info("page %s saved updatedAt=%s", slug, saved.get("updatedAt"))
        return saved
