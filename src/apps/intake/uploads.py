"""
Placement of uploaded images under the uploads root.

Placement is a pure decision (:func:`place_upload`); writing the bytes is a
separate step (:func:`save_upload`). Files land in
``<uploads-root>/<client-folder>/<base>-<epoch-ms><ext>``.

Two uploads with the same sanitized base and extension for the same client in
the same millisecond resolve to the same path, and the later write replaces
the earlier file.
"""

import logging
import os
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .sanitizers import sanitize_filename_base

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads/"
DEFAULT_EXTENSION = ".jpg"
DEFAULT_BASE = "upload"


class UploadedImage(Protocol):
    name: str

    def chunks(self) -> Iterable[bytes]: ...


@dataclass(frozen=True)
class UploadPlacement:
    """Where one uploaded file goes and how it is referenced publicly."""

    uploads_root: Path
    client_folder: str
    filename: str

    @property
    def directory(self) -> Path:
        return self.uploads_root / self.client_folder

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    @property
    def public_url(self) -> str:
        return public_url_for(self.uploads_root, self.path)


def public_url_for(uploads_root: Path, path: Path) -> str:
    """``/uploads/`` plus the path relative to the root, always with forward slashes."""
    return UPLOADS_URL_PREFIX + path.relative_to(uploads_root).as_posix()


def place_upload(
    uploads_root: Path,
    client_folder: str,
    original_filename: str,
    *,
    timestamp_ms: int | None = None,
) -> UploadPlacement:
    """Decide the destination of one upload without touching the disk."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    base, ext = os.path.splitext(os.path.basename(original_filename or ""))
    safe_base = sanitize_filename_base(base) or DEFAULT_BASE
    return UploadPlacement(
        uploads_root=Path(uploads_root),
        client_folder=client_folder,
        filename=f"{safe_base}-{timestamp_ms}{ext or DEFAULT_EXTENSION}",
    )


def save_upload(placement: UploadPlacement, upload: UploadedImage) -> str:
    """Write the upload to its placement and return the public reference path."""
    placement.directory.mkdir(parents=True, exist_ok=True)
    with placement.path.open("wb") as fh:
        for chunk in upload.chunks():
            fh.write(chunk)
    logger.info("Stored upload %r as %s", upload.name, placement.path)
    return placement.public_url
