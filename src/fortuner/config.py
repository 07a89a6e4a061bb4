"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

RECORD_DELIMITER = "%"
INDEX_EXTENSION = ".dat"
NO_FORTUNES_MESSAGE = "No fortunes found"
DEFAULT_ENCODING = "utf-8"
MAX_SEED = 2**64 - 1


@dataclass(slots=True)
class AppConfig:
    sources: List[str] = field(default_factory=list)
    pattern: Optional[str] = None
    insensitive: bool = False
    seed: Optional[int] = None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.seed is not None and not 0 <= self.seed <= MAX_SEED:
            raise ValueError(f"seed must be between 0 and {MAX_SEED}, got {self.seed}")

    @property
    def search_mode(self) -> bool:
        return self.pattern is not None
