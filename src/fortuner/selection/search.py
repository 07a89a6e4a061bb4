"""Pattern search over a loaded corpus."""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence

from fortuner.config import RECORD_DELIMITER
from fortuner.models import DisplayLine, Fortune

Matcher = Callable[[str], bool]


def compile_matcher(pattern: str, *, insensitive: bool = False) -> Matcher:
    """Build a predicate that is true when ``pattern`` occurs anywhere in a fortune.

    Raises ``re.error`` for an invalid pattern.
    """
    regex = re.compile(pattern, re.IGNORECASE if insensitive else 0)
    return lambda text: regex.search(text) is not None


class Searcher:
    """Collects matching fortunes with a ``(source)`` header per run of one source."""

    def __init__(self, is_match: Matcher) -> None:
        self.is_match = is_match

    def search(self, corpus: Sequence[Fortune]) -> List[DisplayLine]:
        lines: List[DisplayLine] = []
        last_source: Optional[str] = None
        for fortune in corpus:
            if not self.is_match(fortune.text):
                continue
            if fortune.source != last_source:
                lines.append(DisplayLine(f"({fortune.source})", is_header=True))
                lines.append(DisplayLine(RECORD_DELIMITER, is_header=True))
                last_source = fortune.source
            lines.append(DisplayLine(fortune.text))
            lines.append(DisplayLine(RECORD_DELIMITER))
        return lines
