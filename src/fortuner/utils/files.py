"""Utility helpers for locating fortune files."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterator, List, Sequence

from fortuner.config import INDEX_EXTENSION
from fortuner.models import FortuneFileError

LOGGER = logging.getLogger(__name__)


def is_index_file(path: Path) -> bool:
    """Return True for compiled ``strfile`` indexes, which are never parsed as text."""
    return Path(path).suffix == INDEX_EXTENSION


def _log_walk_error(exc: OSError) -> None:
    LOGGER.debug("Skipping unreadable entry %s: %s", exc.filename, exc.strerror)


def iter_directory_files(root: Path) -> Iterator[Path]:
    """Yield every regular file below ``root``, skipping entries that cannot be read."""
    for dirpath, _, filenames in os.walk(root, onerror=_log_walk_error):
        for name in filenames:
            candidate = Path(dirpath) / name
            try:
                info = os.stat(candidate)
            except OSError as exc:
                _log_walk_error(exc)
                continue
            if stat.S_ISREG(info.st_mode):
                yield candidate


def resolve_paths(paths: Sequence[str]) -> List[Path]:
    """Expand file and directory arguments into a sorted, duplicate-free file list.

    Every top-level input must exist; the first one that cannot be inspected
    aborts the whole call with :class:`FortuneFileError`. Files with the index
    extension are dropped whether they were named directly or found by walking
    a directory.
    """
    found: List[Path] = []
    for raw in paths:
        try:
            info = os.stat(raw)
        except OSError as exc:
            raise FortuneFileError(raw, exc) from exc

        path = Path(raw)
        if stat.S_ISDIR(info.st_mode):
            found.extend(child for child in iter_directory_files(path) if not is_index_file(child))
        elif stat.S_ISREG(info.st_mode):
            if not is_index_file(path):
                found.append(path)
        else:
            LOGGER.debug("Ignoring %s: not a regular file or directory", raw)

    resolved: List[Path] = []
    for path in sorted(found, key=str):
        if not resolved or str(resolved[-1]) != str(path):
            resolved.append(path)
    LOGGER.debug("Resolved %d fortune file(s) from %d input(s)", len(resolved), len(paths))
    return resolved
