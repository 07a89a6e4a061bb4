"""Text helpers for splitting fortune files into records."""

from __future__ import annotations

import re
from typing import List

from fortuner.config import RECORD_DELIMITER

# A delimiter is a whole line; one at end of file may lack its newline.
_DELIMITER_RE = re.compile(rf"^{re.escape(RECORD_DELIMITER)}(?:\n|\Z)", re.MULTILINE)
_LEADING_BLANK_LINES_RE = re.compile(r"\A(?:[ \t\r\f\v]*\n)+")


def trim_record(segment: str) -> str:
    """Drop leading blank lines and trailing whitespace, keeping inner layout intact."""
    return _LEADING_BLANK_LINES_RE.sub("", segment.rstrip())


def split_records(text: str) -> List[str]:
    """Split fortune file contents into trimmed, non-empty records."""
    records = []
    for segment in _DELIMITER_RE.split(text):
        record = trim_record(segment)
        if record:
            records.append(record)
    return records

