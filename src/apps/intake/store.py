"""
JSON-backed submission store.

The whole document is ``{"submissions": [...]}`` in arrival order. Appends are
a read-modify-write over the full file; a process-wide lock serializes them and
each write goes to a temporary sibling that is then moved over the original.
Unreadable or malformed content is treated as an empty store.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from django.conf import settings

logger = logging.getLogger(__name__)

_write_lock = threading.Lock()


def empty_document() -> dict[str, list]:
    return {"submissions": []}


class SubmissionStore:
    """Append-only list of submission records persisted as one JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def ensure_initialized(self) -> None:
        """Create the parent directory and an empty document if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self.path.open("x", encoding="utf-8") as fh:
                json.dump(empty_document(), fh, indent=2)
        except FileExistsError:
            pass
        else:
            logger.info("Initialized submission store at %s", self.path)

    def _load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw or '{"submissions": []}')
        except (OSError, ValueError):
            logger.warning("Submission store %s is unreadable, treating it as empty", self.path)
            return empty_document()
        if not isinstance(data, dict) or not isinstance(data.get("submissions"), list):
            logger.warning("Submission store %s has an unexpected shape, treating it as empty", self.path)
            return empty_document()
        return data

    def _write(self, data: dict[str, Any]) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def append(self, record: dict[str, Any]) -> None:
        """Add one record to the end of the document and persist it."""
        with _write_lock:
            self.ensure_initialized()
            data = self._load()
            data["submissions"].append(record)
            self._write(data)

    def read_all(self) -> dict[str, Any]:
        """Return the parsed document, or an empty one on any read failure."""
        try:
            self.ensure_initialized()
        except OSError:
            logger.exception("Could not initialize submission store at %s", self.path)
            return empty_document()
        return self._load()


def get_submission_store() -> SubmissionStore:
    """Store bound to the currently configured ``SUBMISSIONS_FILE``."""
    return SubmissionStore(settings.SUBMISSIONS_FILE)
