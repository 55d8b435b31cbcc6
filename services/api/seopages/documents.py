# services/api/seopages/documents.py
"""
Page document shape helpers.

Everything here is pure: callers get new dicts back and the input is never
mutated. Legacy shapes are mapped to the canonical one by
``normalize_document`` which the stores call exactly once when a document
crosses into the service (record load, file load, incoming save).
"""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from pydantic import ValidationError

from .schemas_pages import BLOCK_ADAPTER

LOG = logging.getLogger("seopages.documents")

CONTACT_SLUG = "contact"
ALLOWED_SLUGS = ("terms-of-service", "privacy-policy", CONTACT_SLUG)
SECTIONED_SLUGS = frozenset({"terms-of-service", "privacy-policy"})

DEFAULT_SCHEMA_VERSION = 1

BLOCK_ALIASES = {
    "paragraph": "p",
    "list": "ul",
    "subheading": "h3",
    "rich-paragraph": "p_rich",
    "rich_paragraph": "p_rich",
}

# legacy top-level contact fields that belong under contactDetails
_CONTACT_FIELDS = ("supportEmail", "email", "phone", "whatsapp", "supportHours", "addressLine1", "addressLine2")
_ADDRESS_LINE_KEYS = ("addressLine1", "addressLine2")

_WRAPPER_KEYS = ("data", "page", "payload", "value")


def normalize_slug(raw: Any) -> str:
    return str(raw or "").strip().strip("/")

def is_allowed_slug(slug: str) -> bool:
    return slug in ALLOWED_SLUGS

def is_section_bearing(slug: str) -> bool:
    return slug in SECTIONED_SLUGS

def has_content(doc: Any) -> bool:
    return isinstance(doc, dict) and "content" in doc

def count_sections(doc: Any) -> int:
    if not isinstance(doc, dict):
        return 0
    content = doc.get("content")
    if not isinstance(content, dict):
        return 0
    secs = content.get("sections")
    return len(secs) if isinstance(secs, list) else 0

# --------------------------
# revision marker
# --------------------------

def iso_timestamp(dt: datetime) -> str:
    """UTC, millisecond precision, 'Z' suffix."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"

def parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt

def next_revision(prior: Any, now: datetime) -> str:
    """
    Returns an updatedAt value strictly later than ``prior``.
    When the clock has not moved past the prior revision (same millisecond,
    or clock skew between instances) the prior value is bumped by 1 ms.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.replace(microsecond=(now.microsecond // 1000) * 1000)
    prev = parse_timestamp(prior)
    if prev is not None:
        prev = prev.replace(microsecond=(prev.microsecond // 1000) * 1000)
        if now <= prev:
            now = prev + timedelta(milliseconds=1)
    return iso_timestamp(now)

def ensure_document(slug: str, raw: Any, touch_revision: bool, now: Optional[str] = None) -> dict:
    """
    Fill in the envelope fields of a page document.

    - non-object input becomes {"content": raw}
    - slug is stamped with the requested slug (store key wins)
    - schemaVersion defaults to 1
    - updatedAt is set when touch_revision is true or when missing

    On GET paths touch_revision must stay False; otherwise every read would
    rewrite the timestamp and anything watching the mirror file would loop.
    """
    doc = dict(raw) if isinstance(raw, dict) else {"content": raw}
    doc["slug"] = slug
    if doc.get("schemaVersion") is None:
        doc["schemaVersion"] = DEFAULT_SCHEMA_VERSION
    if touch_revision or not doc.get("updatedAt"):
        doc["updatedAt"] = now or iso_timestamp(datetime.now(timezone.utc))
    return doc

# --------------------------
# legacy shapes
# --------------------------

def extract_document(raw: Any) -> Any:
    """
    Old rows sometimes hold the document one level down
    ({"data": {...}}, {"page": {...}}, ...). Returns the inner document when
    the outer object has no content of its own.
    """
    if not isinstance(raw, dict) or "content" in raw:
        return raw
    for key in _WRAPPER_KEYS:
        inner = raw.get(key)
        if isinstance(inner, dict) and isinstance(inner.get("content"), dict):
            return inner
    return raw

def normalize_block(block: Any) -> Any:
    if not isinstance(block, dict):
        return block
    out = dict(block)
    kind = out.get("type")
    if kind in BLOCK_ALIASES:
        out["type"] = BLOCK_ALIASES[kind]
    try:
        return BLOCK_ADAPTER.validate_python(out).model_dump()
    except ValidationError:
        # unknown kinds and malformed blocks are passed through for the editor to fix
        LOG.debug("block left as-is: type=%r", out.get("type"))
        return out

def _normalize_sections(sections: list) -> list:
    out = []
    for sec in sections:
        if isinstance(sec, dict) and isinstance(sec.get("blocks"), list):
            sec = dict(sec)
            sec["blocks"] = [normalize_block(b) for b in sec["blocks"]]
        out.append(sec)
    return out

def _merge_address_lines(details: dict) -> bool:
    current = details.get("address")
    current = list(current) if isinstance(current, list) else []
    if not any(k in details for k in _ADDRESS_LINE_KEYS):
        return False

    # an explicit line field overrides the list entry at the same position
    merged = []
    for i, key in enumerate(_ADDRESS_LINE_KEYS):
        if key in details:
            line = details.pop(key)
            if isinstance(line, str) and line.strip():
                merged.append(line)
        elif i < len(current):
            merged.append(current[i])
    merged.extend(current[len(_ADDRESS_LINE_KEYS):])
    details["address"] = merged
    return True

def _normalize_contact_details(content: dict) -> dict:
    details = content.get("contactDetails")
    details = dict(details) if isinstance(details, dict) else {}

    moved = False
    for key in _CONTACT_FIELDS:
        if key in content:
            details.setdefault(key, content.pop(key))
            moved = True

    if "email" in details:
        email = details.pop("email")
        details.setdefault("supportEmail", email)
        moved = True

    if _merge_address_lines(details):
        moved = True

    if moved or "contactDetails" in content:
        content["contactDetails"] = details
    return content

def normalize_content(content: Any, slug: str) -> Any:
    """Map legacy content shapes onto the canonical one. Canonical input comes back equal."""
    if not isinstance(content, dict):
        return content
    out = copy.deepcopy(content)
    if isinstance(out.get("sections"), list):
        out["sections"] = _normalize_sections(out["sections"])
    if slug == CONTACT_SLUG:
        out = _normalize_contact_details(out)
    return out

def normalize_document(raw: Any, slug: str) -> Any:
    doc = extract_document(raw)
    if not isinstance(doc, dict) or not isinstance(doc.get("content"), dict):
        return doc
    out = dict(doc)
    out["content"] = normalize_content(out["content"], slug)
    return out
