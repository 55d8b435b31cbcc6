"""
Behavioral tests for the record/file reconciliation in seopages/page_sync.py.

Covers seeding, the placeholder upgrade, the no-touch read rule and the
write path, including store failures.
"""

import json

import pytest

from seopages import models
from seopages.documents import parse_timestamp
from seopages.page_sync import (
    FALLBACK,
    RECORD,
    SEEDED_FROM_FILE,
    SEEDED_FROM_TEMPLATE,
    UPGRADED,
    MalformedInput,
    PageSync,
)
from seopages.record_store import PersistFailed, StoreUnavailable
from seopages.templates import template_for


def _sections(n):
    return [{"title": f"S{i}", "blocks": [{"type": "p", "text": f"body {i}"}]} for i in range(n)]


def _legal(n, updated_at="2026-01-01T00:00:00.000Z", h1="Terms of Service"):
    return {
        "schemaVersion": 1,
        "slug": "terms-of-service",
        "updatedAt": updated_at,
        "seo": {"title": "Terms"},
        "content": {"h1": h1, "lastUpdated": "January 1, 2026", "sections": _sections(n)},
    }


def _write_file(store_dir, slug, doc):
    store_dir.mkdir(parents=True, exist_ok=True)
    path = store_dir / f"page.{slug}.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def _read_file(store_dir, slug):
    return json.loads((store_dir / f"page.{slug}.json").read_text(encoding="utf-8"))


@pytest.fixture
def write_calls(files, monkeypatch):
    calls = []
    original = files.atomic_write

    def counting(path, doc):
        calls.append(path)
        return original(path, doc)

    monkeypatch.setattr(files, "atomic_write", counting)
    return calls


class BrokenRecords:
    """Record store double whose database is unreachable."""

    def __init__(self):
        self.save_attempts = 0

    def load(self, slug):
        raise StoreUnavailable("connection refused")

    def save(self, slug, doc):
        self.save_attempts += 1
        raise PersistFailed("connection refused")


class TestSeeding:

    def test_contact_seeded_from_template(self, sync, records, store_dir):
        res = sync.resolve("contact")

        expected = template_for("contact")
        assert res.source == SEEDED_FROM_TEMPLATE
        assert res.wrote_file
        assert res.document == expected
        assert res.document["schemaVersion"] == 1
        assert records.load("contact") == expected
        assert _read_file(store_dir, "contact") == expected

    def test_seeding_is_idempotent(self, sync, write_calls):
        first = sync.resolve("terms-of-service")
        second = sync.resolve("terms-of-service")

        assert first.document == second.document
        assert first.source == SEEDED_FROM_TEMPLATE
        assert second.source == RECORD
        assert len(write_calls) == 1

    def test_seeded_from_file_without_rewriting_it(self, sync, records, store_dir, write_calls):
        on_disk = _legal(4)
        _write_file(store_dir, "terms-of-service", on_disk)

        res = sync.resolve("terms-of-service")

        assert res.source == SEEDED_FROM_FILE
        assert res.document == on_disk
        assert records.load("terms-of-service") == on_disk
        assert write_calls == []

    def test_file_with_empty_content_falls_back_to_template(self, sync, store_dir, write_calls):
        _write_file(store_dir, "contact", {"content": {}})

        res = sync.resolve("contact")

        assert res.source == SEEDED_FROM_TEMPLATE
        assert res.document["content"] == template_for("contact")["content"]
        # a file already exists, so the seed is not mirrored over it
        assert write_calls == []

    def test_file_slug_mismatch_is_repaired(self, sync, store_dir):
        _write_file(store_dir, "contact", {"slug": "privacy-policy", "content": {"h1": "Contact"}})
        assert sync.resolve("contact").document["slug"] == "contact"


class TestNoLoopRead:

    def test_complete_record_is_returned_untouched(self, sync, records, store_dir, write_calls):
        doc = _legal(3, updated_at="2026-02-01T00:00:00.000Z")
        records.save("terms-of-service", doc)
        path = _write_file(store_dir, "terms-of-service", doc)
        mtime = path.stat().st_mtime_ns

        for _ in range(3):
            res = sync.resolve("terms-of-service")
            assert res.source == RECORD
            assert res.document["updatedAt"] == "2026-02-01T00:00:00.000Z"

        assert write_calls == []
        assert path.stat().st_mtime_ns == mtime

    def test_record_wins_over_differing_file(self, sync, records, store_dir):
        records.save("contact", {"slug": "contact", "updatedAt": "2026-01-01T00:00:00.000Z", "content": {"h1": "db"}})
        _write_file(store_dir, "contact", {"content": {"h1": "file"}})

        assert sync.resolve("contact").document["content"] == {"h1": "db"}

    def test_missing_file_is_mirrored_without_revision_touch(self, sync, records, store_dir, write_calls):
        doc = {"slug": "contact", "schemaVersion": 1, "updatedAt": "2026-01-01T00:00:00.000Z", "content": {"h1": "db"}}
        records.save("contact", doc)

        res = sync.resolve("contact")

        assert res.wrote_file
        assert len(write_calls) == 1
        assert _read_file(store_dir, "contact") == doc
        assert res.document == doc

    def test_single_section_contact_is_not_upgraded(self, sync, records):
        doc = {"slug": "contact", "updatedAt": "2026-01-01T00:00:00.000Z", "content": {"h1": "c", "sections": _sections(1)}}
        records.save("contact", doc)

        res = sync.resolve("contact")
        assert res.source == RECORD
        assert res.document["updatedAt"] == "2026-01-01T00:00:00.000Z"

    def test_record_without_content_is_returned_but_not_mirrored(self, sync, records, write_calls):
        records.save("contact", {"seo": {"title": "only seo"}})

        res = sync.resolve("contact")

        assert res.source == RECORD
        assert res.document["seo"] == {"title": "only seo"}
        assert res.document["slug"] == "contact"
        assert write_calls == []


class TestUpgrade:

    @pytest.fixture
    def two_section_template(self, monkeypatch):
        tpl = _legal(2, updated_at="2025-12-17T00:00:00.000Z", h1="Template")
        monkeypatch.setattr("seopages.page_sync.template_for", lambda slug: dict(tpl, slug=slug))
        return tpl

    def test_placeholder_record_upgraded_from_fuller_file(self, sync, records, store_dir, two_section_template, write_calls):
        records.save("terms-of-service", _legal(1, updated_at="2026-01-01T00:00:00.000Z", h1="Placeholder"))
        _write_file(store_dir, "terms-of-service", _legal(3, updated_at="2025-06-01T00:00:00.000Z", h1="File"))

        res = sync.resolve("terms-of-service")

        assert res.source == UPGRADED
        assert res.document["content"]["h1"] == "File"
        assert len(res.document["content"]["sections"]) == 3
        assert parse_timestamp(res.document["updatedAt"]) > parse_timestamp("2026-01-01T00:00:00.000Z")
        assert records.load("terms-of-service") == res.document
        # file already existed: not rewritten
        assert write_calls == []

    def test_upgrade_is_self_limiting(self, sync, records, store_dir, two_section_template, clock):
        records.save("terms-of-service", _legal(1))
        _write_file(store_dir, "terms-of-service", _legal(3, h1="File"))

        upgraded = sync.resolve("terms-of-service").document
        clock.advance(hours=1)
        again = sync.resolve("terms-of-service")

        assert again.source == RECORD
        assert again.document == upgraded

    def test_template_used_when_it_has_more_sections(self, sync, records, store_dir, write_calls):
        records.save("terms-of-service", _legal(1))

        res = sync.resolve("terms-of-service")

        assert res.source == UPGRADED
        assert res.document["content"] == template_for("terms-of-service")["content"]
        # no file existed, so the upgrade is mirrored once
        assert len(write_calls) == 1
        assert _read_file(store_dir, "terms-of-service") == res.document

    def test_tie_prefers_file(self, sync, records, store_dir, two_section_template):
        records.save("terms-of-service", _legal(0))
        _write_file(store_dir, "terms-of-service", _legal(2, h1="File"))

        assert sync.resolve("terms-of-service").document["content"]["h1"] == "File"

    def test_upgrade_revision_passes_future_stamp(self, sync, records, clock):
        records.save("privacy-policy", {"content": {"sections": []}, "updatedAt": "2030-01-01T00:00:00.000Z"})

        res = sync.resolve("privacy-policy")

        assert res.source == UPGRADED
        assert res.document["updatedAt"] == "2030-01-01T00:00:00.001Z"


class TestRecordStoreUnavailable:

    def test_read_falls_back_to_file(self, files, store_dir, clock, write_calls):
        on_disk = _legal(5)
        _write_file(store_dir, "terms-of-service", on_disk)
        broken = BrokenRecords()

        res = PageSync(broken, files, clock=clock).resolve("terms-of-service")

        assert res.source == FALLBACK
        assert res.document == on_disk
        assert broken.save_attempts == 0
        assert write_calls == []

    def test_read_falls_back_to_template_and_writes_missing_file(self, files, store_dir, clock):
        res = PageSync(BrokenRecords(), files, clock=clock).resolve("privacy-policy")

        assert res.source == FALLBACK
        assert res.document == template_for("privacy-policy")
        assert _read_file(store_dir, "privacy-policy") == res.document

    def test_write_surfaces_persist_failure(self, files, store_dir, clock):
        with pytest.raises(PersistFailed):
            PageSync(BrokenRecords(), files, clock=clock).apply("contact", {"content": {"h1": "x"}})
        assert not (store_dir / "page.contact.json").exists()


class ReadOnlyRecords:
    """Record store double that reads fine but rejects every write."""

    def __init__(self, stored=None):
        self.stored = stored
        self.save_attempts = 0

    def load(self, slug):
        return self.stored

    def save(self, slug, doc):
        self.save_attempts += 1
        raise PersistFailed("read-only replica")


class TestReadTimeWriteRejected:

    def test_seed_is_served_and_mirrored(self, files, store_dir, clock):
        records = ReadOnlyRecords()

        res = PageSync(records, files, clock=clock).resolve("contact")

        assert res.source == FALLBACK
        assert res.document == template_for("contact")
        assert records.save_attempts == 1
        assert res.wrote_file
        assert _read_file(store_dir, "contact") == res.document

    def test_upgrade_is_served_and_mirrored(self, files, store_dir, clock):
        records = ReadOnlyRecords(_legal(1))

        res = PageSync(records, files, clock=clock).resolve("terms-of-service")

        assert res.source == FALLBACK
        assert res.document["content"] == template_for("terms-of-service")["content"]
        assert records.save_attempts == 1
        assert _read_file(store_dir, "terms-of-service") == res.document


class TestApply:

    def test_rejects_non_object(self, sync, db):
        with pytest.raises(MalformedInput):
            sync.apply("contact", ["not", "an", "object"])
        assert db.query(models.SeoPage).count() == 0

    def test_persists_and_mirrors(self, sync, records, store_dir):
        saved = sync.apply("contact", {"seo": {"title": "T"}, "content": {"h1": "Hello"}})

        assert saved["slug"] == "contact"
        assert saved["schemaVersion"] == 1
        assert saved["updatedAt"] == "2026-03-01T12:00:00.000Z"
        assert records.load("contact") == saved
        assert _read_file(store_dir, "contact") == saved

    def test_always_advances_revision(self, sync):
        payload = {"content": {"h1": "same"}}
        first = sync.apply("contact", payload)
        # clock has not moved and content is identical
        second = sync.apply("contact", payload)
        third = sync.apply("contact", dict(second))

        stamps = [parse_timestamp(d["updatedAt"]) for d in (first, second, third)]
        assert stamps[0] < stamps[1] < stamps[2]

    def test_round_trip(self, sync):
        incoming = {
            "seo": {"title": "Privacy", "keywords": ["a", "b"]},
            "content": {
                "h1": "Privacy Policy",
                "lastUpdated": "March 1, 2026",
                "sections": [
                    {"title": "One", "blocks": [{"type": "h3", "text": "1.1"}, {"type": "p", "text": "x"}]},
                    {"title": "Two", "blocks": [{"type": "ul", "items": ["a"]}, {
                        "type": "p_rich",
                        "inlines": [{"type": "text", "value": "see "}, {"type": "link", "href": "/terms", "label": "terms"}],
                    }]},
                ],
            },
        }
        sync.apply("privacy-policy", incoming)
        res = sync.resolve("privacy-policy")

        assert res.source == RECORD
        stripped = {k: v for k, v in res.document.items() if k not in ("slug", "schemaVersion", "updatedAt")}
        assert stripped == incoming

    def test_mirror_failure_does_not_fail_the_save(self, sync, records, store_dir, monkeypatch):
        _write_file(store_dir, "contact", {"slug": "contact", "content": {"h1": "old"}})

        def crash(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("seopages.file_store.os.replace", crash)
        saved = sync.apply("contact", {"content": {"h1": "new"}})

        assert records.load("contact")["content"] == {"h1": "new"}
        assert saved["content"] == {"h1": "new"}
        # the public mirror still holds the last good file
        assert _read_file(store_dir, "contact")["content"] == {"h1": "old"}

    def test_legacy_shape_normalized_on_save(self, sync):
        saved = sync.apply("contact", {"content": {"h1": "c", "email": "a@example.com"}})
        assert saved["content"] == {"h1": "c", "contactDetails": {"supportEmail": "a@example.com"}}

    @pytest.mark.parametrize("slug", ["privacy-policy", "terms-of-service"])
    def test_legal_page_keeps_top_level_email_on_round_trip(self, sync, records, slug):
        content = {"h1": "Privacy", "email": "dpo@example.com", "supportHours": "9-5", "sections": _sections(2)}
        sync.apply(slug, {"content": content})

        assert records.load(slug)["content"] == content
        res = sync.resolve(slug)
        assert res.source == RECORD
        assert res.document["content"] == content
