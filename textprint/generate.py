"""Choice of how a file is processed, and the reports made about printed pages."""

from __future__ import annotations

import enum


class StyleKind(enum.Enum):
    """The kind of treatment to apply to a file."""

    NO_STYLE = "plain"
    BINARY = "binary"
    SSHPARSER = "sshparser"
    UNPRINTABLE = "UNPRINTABLE"
    DELEGATE = "delegate"


_KINDS = {
    "binary": StyleKind.BINARY,
    "UNPRINTABLE": StyleKind.UNPRINTABLE,
    "plain": StyleKind.NO_STYLE,
    "delegate": StyleKind.DELEGATE,
}


def string_to_style_kind(text: str) -> StyleKind:
    """The treatment named by TEXT; any other name is a style sheet key."""
    return _KINDS.get(text, StyleKind.SSHPARSER)


def _physical_sheets(sheets: int, duplex: bool) -> int:
    """Sheets of paper used: two sides of a sheet are used when printing duplex."""
    return (sheets + 1) // 2 if duplex else sheets


def file_pages_message(
    name: str, style: str, pages: int, sheets: int, duplex: bool = False
) -> str:
    """The report on the pages and sheets used by the file NAME printed in STYLE."""
    sheets = _physical_sheets(sheets, duplex)
    if pages == 1:
        return f"[{name} ({style}): 1 page on 1 sheet]\n"
    if sheets == 1:
        return f"[{name} ({style}): {pages} pages on 1 sheet]\n"
    return f"[{name} ({style}): {pages} pages on {sheets} sheets]\n"


def job_pages_message(
    pages: int, sheets: int, duplex: bool = False, destination: str = ""
) -> str:
    """The report on the whole job, followed by where the output was sent."""
    sheets = _physical_sheets(sheets, duplex)
    if pages == 1:
        return f"[Total: 1 page on 1 sheet] {destination}\n"
    if sheets == 1:
        return f"[Total: {pages} pages on 1 sheet] {destination}\n"
    return f"[Total: {pages} pages on {sheets} sheets] {destination}\n"


def lines_wrapped_message(count: int) -> str:
    """The report on the number of lines that were too long; empty if none."""
    if count <= 0:
        return ""
    if count == 1:
        return "[1 line wrapped]\n"
    return f"[{count} lines wrapped]\n"


def nothing_printed_message() -> str:
    """The report made when no output at all was produced."""
    return "[No output produced]\n"