"""Delegation of files to other applications, and reading what they produce."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

log = logging.getLogger(__name__)

PAGE_TAG = "%%Page: "
NEEDED_RES_TAG = "%%DocumentNeededResources: "
CONTINUATION_TAG = "%%+ "

_BLANKS = " \t\n"


class DelegationError(Exception):
    """Raised when a delegation cannot be defined or fails to run."""


class _Tokenizer:
    """Successive tokens of a string, each with its own set of delimiters."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self, delimiters: str) -> Optional[str]:
        text = self._text
        size = len(text)
        start = self._pos
        while start < size and text[start] in delimiters:
            start += 1
        if start >= size:
            self._pos = size
            return None
        end = start
        while end < size and text[end] not in delimiters:
            end += 1
        # The delimiter that ends the token is consumed with it.
        self._pos = min(end + 1, size)
        return text[start:end]


@dataclass(frozen=True)
class Delegation:
    """An application NAME that turns files of one type into another by COMMAND.

    CONTRACT has the form ``source:destination``, e.g. ``roff:ps``.
    """

    name: str
    contract: str
    command: str

    @property
    def source(self) -> str:
        """The type of the files handled."""
        return self.contract.partition(":")[0]

    @property
    def destination(self) -> str:
        """The type of the files produced."""
        return self.contract.partition(":")[2]

    def describe(self) -> str:
        """A two-line description, as given by the long listing."""
        parts = [part for part in self.contract.split(":") if part]
        source = parts[0] if parts else ""
        destination = parts[1] if len(parts) > 1 else ""
        return (
            f"Delegation `{self.name}', from {source} to {destination}\n"
            f"\t{self.command}\n"
        )


def parse_delegation(filename: str, line: int, contract_line: str) -> Delegation:
    """Parse ``NAME SOURCE:DESTINATION COMMAND`` read at FILENAME:LINE."""
    tokens = _Tokenizer(contract_line)

    def required(value: Optional[str]) -> str:
        if value is None:
            raise DelegationError(
                f"{filename}:{line}: missing argument for `{contract_line}'"
            )
        return value

    name = required(tokens.next(_BLANKS))
    source = required(tokens.next(_BLANKS + ":"))
    destination = required(tokens.next(_BLANKS))
    command = required(tokens.next("\n"))
    return Delegation(name, f"{source}:{destination}", command.lstrip("\t "))


class DelegationTable:
    """The delegations known, indexed by their contract."""

    def __init__(self) -> None:
        self._by_contract: dict[str, Delegation] = {}

    def add(self, delegation: Delegation) -> None:
        """Store DELEGATION, replacing any other one with the same contract."""
        self._by_contract[delegation.contract] = delegation

    def add_line(self, filename: str, line: int, contract_line: str) -> Delegation:
        """Parse a ``Delegation:`` configuration line and store the result."""
        delegation = parse_delegation(filename, line, contract_line)
        self.add(delegation)
        return delegation

    def get_subcontract(self, src_type: str, dest_type: str) -> Optional[Delegation]:
        """The delegation from SRC_TYPE to DEST_TYPE, or None."""
        return self._by_contract.get(f"{src_type}:{dest_type}")

    def __len__(self) -> int:
        return len(self._by_contract)

    def __iter__(self) -> Iterator[Delegation]:
        return iter(self._sorted())

    def _sorted(self) -> list[Delegation]:
        return sorted(self._by_contract.values(), key=lambda d: d.name)

    def list_long(self) -> str:
        """The detailed listing of the delegations, sorted by name."""
        body = "".join(delegation.describe() for delegation in self._sorted())
        return f"Applications configured for delegation\n{body}\n"

    def names(self) -> list[str]:
        """The names of the delegations, sorted."""
        return [delegation.name for delegation in self._sorted()]


@dataclass
class DelegationReport:
    """What was learnt while reading the PostScript produced by a delegation."""

    lines_read: int = 0
    pages: int = 0
    sheets: int = 0
    needed_resources: list[tuple[str, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True when the delegation produced something."""
        return self.lines_read > 0


class _OutputScanner:
    """Follows the DSC comments of a PostScript output, line after line."""

    def __init__(self, pages_per_sheet: int) -> None:
        self.pages_per_sheet = pages_per_sheet
        self.report = DelegationReport()
        self._in_needed_resources = False

    def _add_resources(self, rest: str) -> None:
        tokens = rest.split()
        if not tokens:
            return
        resource, values = tokens[0], tokens[1:]
        # A lone "(atend)" has no value, hence adds nothing.
        self.report.needed_resources.extend((resource, value) for value in values)

    def feed(self, line: str) -> None:
        self.report.lines_read += 1
        if line.startswith(PAGE_TAG):
            self.report.pages += self.pages_per_sheet
            self.report.sheets += 1
        elif line.startswith(NEEDED_RES_TAG):
            self._in_needed_resources = True
            self._add_resources(line[len(NEEDED_RES_TAG):])
        elif line.startswith(CONTINUATION_TAG):
            if self._in_needed_resources:
                self._add_resources(line[len(CONTINUATION_TAG):])


def scan_delegated_output(
    lines: Iterable[str], pages_per_sheet: int = 1
) -> DelegationReport:
    """Count pages and sheets and collect the needed resources of LINES."""
    scanner = _OutputScanner(pages_per_sheet)
    for line in lines:
        scanner.feed(line)
    return scanner.report


def run_delegation(
    command: str, output_path: str, pages_per_sheet: int = 1
) -> DelegationReport:
    """Run COMMAND through the shell, storing its output in OUTPUT_PATH.

    Raises DelegationError if the file cannot be created, the command cannot
    be started, or it produces nothing.
    """
    log.info("Delegating to `%s'", command)
    try:
        out = open(output_path, "wb")
    except OSError as exc:
        raise DelegationError(f"cannot create file `{output_path}': {exc}") from exc

    scanner = _OutputScanner(pages_per_sheet)
    with out:
        try:
            process = subprocess.Popen(command, shell=True, stdout=subprocess.PIPE)
        except OSError as exc:
            raise DelegationError(
                f"cannot open a pipe on `{command}': {exc}"
            ) from exc
        assert process.stdout is not None
        with process.stdout:
            for raw in process.stdout:
                scanner.feed(raw.decode("latin-1"))
                # The content is left untouched.
                out.write(raw)
        process.wait()

    if not scanner.report.succeeded:
        raise DelegationError(f"delegation `{command}' produced no output")
    return scanner.report