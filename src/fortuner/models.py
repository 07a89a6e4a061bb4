"""Core fortuner data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fortune:
    """One fortune paired with the base name of the file it came from."""

    source: str
    text: str


@dataclass(frozen=True, slots=True)
class DisplayLine:
    """A line of search output; headers are routed to stderr."""

    text: str
    is_header: bool = False


class FortuneFileError(Exception):
    """A fortune path could not be found, inspected or read."""

    def __init__(self, path: str, cause: BaseException) -> None:
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.cause = cause
