"""Collect local files into upload entries for the CreateOS files endpoints."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from createos_cli.errors import (
    EncodingError,
    FileReadError,
    NotFoundError,
    TooManyFilesError,
)
from createos_cli.logging_utils import get_logger

LOGGER = get_logger()

MAX_UPLOAD_FILES = 100

# Tuned for typical JS/Python repositories.
IGNORE_DIRS = frozenset(
    {
        ".git",
        "node_modules",
        ".next",
        ".turbo",
        ".cache",
        "__pycache__",
        ".venv",
        ".agents",
        ".claude",
    }
)
IGNORE_FILES = frozenset({".DS_Store"})


class UploadMode(str, Enum):
    """Content encoding used for uploaded files."""

    BASE64 = "base64"
    TEXT = "text"

    @property
    def binary_safe(self) -> bool:
        return self is UploadMode.BASE64


@dataclass(frozen=True)
class UploadEntry:
    """One file in an upload batch."""

    path: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "content": self.content}


def is_ignored(relative_path: str) -> bool:
    """Return whether a root-relative POSIX path should be skipped."""
    parts = relative_path.split("/")
    if any(part in IGNORE_DIRS for part in parts):
        return True
    return parts[-1] in IGNORE_FILES


def discover_files(root: Path) -> list[tuple[Path, str]]:
    """Return (file, relative POSIX path) pairs under root, sorted by path.

    A single file yields one pair named after its base name.
    """
    if root.is_file():
        return [(root, root.name)]
    if not root.is_dir():
        raise NotFoundError(f"Path not found: {root}")
    found: list[tuple[Path, str]] = []
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(root).as_posix()
        if is_ignored(relative):
            continue
        found.append((path, relative))
    found.sort(key=lambda item: item[1])
    return found


def encode_file(path: Path, mode: UploadMode) -> str:
    """Read one file as base64 text or as UTF-8 text."""
    try:
        if mode is UploadMode.BASE64:
            return base64.b64encode(path.read_bytes()).decode("ascii")
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"{path} is not valid UTF-8 text; use base64 mode to upload binary files."
        ) from exc
    except OSError as exc:
        raise FileReadError(f"Could not read {path}: {exc.strerror or exc}") from exc


def collect_upload_entries(root: Path, mode: UploadMode = UploadMode.BASE64) -> list[UploadEntry]:
    """Collect and encode upload entries for a file or directory.

    The file cap is enforced before anything is read. An empty list is a
    valid result.
    """
    files = discover_files(root)
    if len(files) > MAX_UPLOAD_FILES:
        raise TooManyFilesError(
            f"Too many files ({len(files)}). CreateOS upload endpoints accept max "
            f"{MAX_UPLOAD_FILES} files per request. Use a VCS project or reduce the upload set."
        )
    LOGGER.info("Collected %s file(s) from %s for %s upload", len(files), root, mode.value)
    return [UploadEntry(path=relative, content=encode_file(path, mode)) for path, relative in files]


def build_upload_payload(entries: list[UploadEntry]) -> dict[str, Any]:
    """Wrap upload entries in the request body shape expected by the API."""
    return {"files": [entry.to_dict() for entry in entries]}
