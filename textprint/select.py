"""Selection of a style sheet from a file's name or the verdict of file(1)."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Optional

log = logging.getLogger(__name__)

_VERDICT_LINE_MAX = 1023


@dataclass(frozen=True)
class PatternRule:
    """A glob PATTERN on the name or on file's verdict, giving COMMAND."""

    pattern: str
    command: str
    on_file_verdict: bool = False
    insensitive: bool = False

    def __str__(self) -> str:
        kind = "file" if self.on_file_verdict else "name"
        case = "i" if self.insensitive else ""
        return f"{kind}/{self.pattern}: {self.command}/{case}"


class SheetsMap:
    """The ordered rules that map files to style sheet keys."""

    def __init__(self) -> None:
        self._rules: list[PatternRule] = []

    def add(
        self,
        pattern: str,
        on_file_verdict: bool,
        insensitive: bool,
        command: str,
    ) -> PatternRule:
        """Append a rule; later rules take precedence."""
        rule = PatternRule(pattern, command, bool(on_file_verdict), bool(insensitive))
        self._rules.append(rule)
        return rule

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[PatternRule]:
        return iter(self._rules)

    def get_command(
        self, name_to_match: Optional[str], verdict: Optional[str] = None
    ) -> str:
        """The style of the most recent rule matching, or ``plain``."""
        lowered = name_to_match.lower() if name_to_match is not None else None
        for rule in reversed(self._rules):
            if rule.on_file_verdict:
                if verdict and fnmatchcase(verdict, rule.pattern):
                    return rule.command
            elif name_to_match is not None:
                subject = lowered if rule.insensitive else name_to_match
                if fnmatchcase(subject, rule.pattern):
                    return rule.command
        return "plain"


def shell_escape(name: str) -> str:
    """Escape NAME so that it can be put between single quotes for the shell."""
    return name.replace("'", "'\\''")


def file_verdict(file_command: Optional[str], filename: str) -> Optional[str]:
    """What FILE_COMMAND says about FILENAME, or None if it says nothing."""
    if not file_command:
        return None
    command = f"{file_command} '{shell_escape(filename)}'"
    log.debug("Reading pipe: `%s'", command)
    try:
        completed = subprocess.run(
            command, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        log.debug("cannot open a pipe on `%s': %s", command, exc)
        return None

    lines = completed.stdout.decode("latin-1").splitlines(keepends=True)
    if not lines:
        return None
    answer = lines[0][:_VERDICT_LINE_MAX]
    log.debug("file(1): %s", answer)

    # The answer is expected to be "filename: verdict".
    _, colon, verdict = answer.partition(":")
    if not colon:
        return None
    verdict = verdict.lstrip(" \t")
    if not verdict:
        return None
    log.debug("File's verdict: %s", verdict)
    # Drop the final end of line.
    return verdict[:-1]