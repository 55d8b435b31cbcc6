# services/api/seopages/file_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Tuple

from .config import settings
from .documents import has_content, normalize_document

LOG = logging.getLogger("seopages.files")

class FileStore:
    """
    Filesystem mirror of page documents: one pretty-printed page.<slug>.json
    per slug. The public site reads these files directly, so every write goes
    through atomic_write.
    """

    def __init__(
        self,
        override_dir: str | None = None,
        cwd: str | None = None,
        subdir: str = "seo-config",
        max_parents: int = 4,
    ):
        self.override_dir = (override_dir or "").strip() or None
        self.cwd = Path(cwd or os.getcwd())
        self.subdir = subdir
        self.max_parents = int(max_parents)

    @classmethod
    def from_settings(cls) -> "FileStore":
        return cls(
            override_dir=settings.SEO_STORE_DIR,
            subdir=settings.SEO_STORE_SUBDIR,
            max_parents=settings.SEO_STORE_MAX_PARENTS,
        )

    @staticmethod
    def filename_for(slug: str) -> str:
        return f"page.{slug}.json"

    def candidate_dirs(self) -> list[Path]:
        """Override dir first, then <subdir> in cwd and each ancestor, closest first."""
        dirs: list[Path] = []
        if self.override_dir:
            dirs.append(Path(self.override_dir).resolve())
        base = self.cwd.resolve()
        for _ in range(self.max_parents + 1):
            dirs.append(base / self.subdir)
            base = base.parent

        out: list[Path] = []
        for d in dirs:
            if d not in out:
                out.append(d)
        return out

    def resolve_existing_path(self, slug: str) -> Optional[Path]:
        name = self.filename_for(slug)
        for d in self.candidate_dirs():
            p = d / name
            if p.is_file():
                return p
        return None

    def default_path(self, slug: str) -> Path:
        name = self.filename_for(slug)
        if self.override_dir:
            return Path(self.override_dir).resolve() / name
        # the most "rooted" candidate is where new files are created
        return self.candidate_dirs()[-1] / name

    def path_for(self, slug: str) -> Path:
        return self.resolve_existing_path(slug) or self.default_path(slug)

    @staticmethod
    def read_json(path: Path) -> Any:
        try:
            return json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None

    def load(self, slug: str) -> Tuple[Optional[Path], Optional[dict]]:
        """
        Returns (existing_path, document). The document is None when no file
        exists or when the file holds nothing usable (no content key).
        """
        path = self.resolve_existing_path(slug)
        if path is None:
            return None, None
        raw = normalize_document(self.read_json(path), slug)
        return path, (raw if has_content(raw) else None)

    @staticmethod
    def atomic_write(path: Path, doc: Any) -> None:
        """Write <path>.tmp then rename over path; readers see the old file or the new one."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(json.dumps(doc, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, path)
