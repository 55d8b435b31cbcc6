"""
Shared fixtures for the page synchronization tests.

The app settings are read at import time, so the database URL is pinned to an
in-memory SQLite engine before anything from ``seopages`` is imported.
"""

import os
import sys
from datetime import datetime, timedelta, timezone

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("SEO_STORE_DIR", None)

_api_root = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "services", "api")
if _api_root not in sys.path:
    sys.path.insert(0, _api_root)

import pytest

from seopages.db import Base, SessionLocal, engine
from seopages.file_store import FileStore
from seopages.page_sync import PageSync
from seopages.record_store import RecordStore


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def db():
    Base.metadata.create_all(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store_dir(tmp_path):
    return tmp_path / "seo-config"


@pytest.fixture
def files(tmp_path, store_dir):
    return FileStore(override_dir=str(store_dir), cwd=str(tmp_path))


@pytest.fixture
def records(db):
    return RecordStore(db)


@pytest.fixture
def sync(records, files, clock):
    return PageSync(records, files, clock=clock)
