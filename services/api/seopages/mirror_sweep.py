# services/api/seopages/mirror_sweep.py

from typing import Iterable

from .documents import ALLOWED_SLUGS
from .page_sync import PageSync

def run_mirror_sweep(sync: PageSync, slugs: Iterable[str] = ALLOWED_SLUGS) -> dict:
    """
    Resolves every page slug once, which seeds missing records and re-creates
    missing mirror files. Follows the read rules, so complete pages are left
    untouched and updatedAt never moves except for placeholder upgrades.
    """
    sources: dict[str, str] = {}
    files_written = 0
    for slug in slugs:
        res = sync.resolve(slug)
        sources[slug] = res.source
        if res.wrote_file:
            files_written += 1

    return {
        "sources": sources,
        "files_written": files_written,
    }
