# services/api/seopages/mirror_runner.py

import time
import logging

from sqlalchemy.orm import Session as OrmSession

from .config import settings
from .db import SessionLocal
from .file_store import FileStore
from .logging_mw import configure_logging
from .mirror_sweep import run_mirror_sweep
from .page_sync import PageSync
from .record_store import RecordStore
from .throttle import TtlGate

LOG = logging.getLogger("seopages.sweep")

def sweep_once() -> dict:
    db: OrmSession = SessionLocal()
    try:
        sync = PageSync(RecordStore(db), FileStore.from_settings())
        return run_mirror_sweep(sync)
    finally:
        db.close()

def tick(gate: TtlGate, now: float) -> dict | None:
    if not gate.should_run(now):
        return None
    try:
        res = sweep_once()
        LOG.info(f"sweep_ok {res}")
        return res
    except Exception as e:
        LOG.exception(f"sweep_failed: {e}")
        return None

def main():
    configure_logging()
    gate = TtlGate(settings.MIRROR_SWEEP_INTERVAL_SEC)
    poll = max(1, int(settings.MIRROR_POLL_SECONDS))
    while True:
        tick(gate, time.monotonic())
        time.sleep(poll)

if __name__ == "__main__":
    main()
