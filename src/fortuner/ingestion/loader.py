"""Fortune file loading.

Each file is read whole and split on ``%`` delimiter lines. Records keep the
base name of their file so search output can be grouped by source.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from fortuner.config import DEFAULT_ENCODING
from fortuner.models import Fortune, FortuneFileError
from fortuner.utils.text import split_records

LOGGER = logging.getLogger(__name__)


def read_fortune_file(path: Path, *, encoding: str = DEFAULT_ENCODING) -> List[Fortune]:
    """Read a single fortune file into records tagged with its base name."""
    path = Path(path)
    try:
        content = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise FortuneFileError(str(path), exc) from exc

    fortunes = [Fortune(source=path.name, text=record) for record in split_records(content)]
    if not fortunes:
        LOGGER.debug("No fortunes in %s", path)
    return fortunes


def load_fortunes(files: Iterable[Path], *, encoding: str = DEFAULT_ENCODING) -> List[Fortune]:
    """Load every file in order into one corpus."""
    corpus: List[Fortune] = []
    for path in files:
        fortunes = read_fortune_file(path, encoding=encoding)
        LOGGER.debug("Loaded %d fortune(s) from %s", len(fortunes), path)
        corpus.extend(fortunes)
    return corpus
