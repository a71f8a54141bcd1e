"""Standard version numbers of the form ``MAJOR.MINOR`` or ``MAJOR.MINORletter``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VERSION_RE = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)(.)?", re.DOTALL)


class InvalidVersionError(ValueError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid version number `{text}'")
        self.text = text


def _short_int_len(value: int) -> int:
    return 1 if value < 10 else 2


@dataclass(frozen=True, order=True)
class Version:
    """A version number; ``letter`` is 0 when absent, 1 for ``a``, 2 for ``b``..."""

    major: int = 0
    minor: int = 0
    letter: int = 0

    def is_null(self) -> bool:
        """True when every component is zero."""
        return not (self.major or self.minor or self.letter)

    def printed_length(self) -> int:
        """Number of characters the version takes once printed."""
        base = _short_int_len(self.major) + _short_int_len(self.minor)
        if self.letter:
            return 2 + base + 1
        return 1 + base

    def __add__(self, other: Version) -> Version:
        if not isinstance(other, Version):
            return NotImplemented
        return Version(
            self.major + other.major,
            self.minor + other.minor,
            self.letter + other.letter,
        )

    def __str__(self) -> str:
        if self.letter:
            return f"{self.major}.{self.minor}{chr(ord('a') + self.letter - 1)}"
        return f"{self.major}.{self.minor}"


def parse_version(text: str) -> Version:
    """Parse ``digits.digits`` optionally followed by one character."""
    match = _VERSION_RE.match(text)
    if match is None:
        raise InvalidVersionError(text)
    major, minor, suffix = match.groups()
    letter = ord(suffix) - ord("a") + 1 if suffix is not None else 0
    return Version(int(major), int(minor), letter)