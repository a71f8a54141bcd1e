"""Line-by-line reading of text with conversion of end-of-line conventions."""

from __future__ import annotations

import enum
import shutil
from collections.abc import Iterator
from typing import BinaryIO, Callable, Optional

_LF = 0x0A
_CR = 0x0D
_FF = 0x0C

SAMPLE_SIZE = 512


class Eol(enum.Enum):
    """Which byte sequences end a line."""

    R = "r"
    N = "n"
    RN = "rn"
    NR = "nr"
    AUTO = "auto"


_EOL_STRINGS = {
    Eol.R: "\\r",
    Eol.N: "\\n",
    Eol.RN: "\\r\\n",
    Eol.NR: "\\n\\r",
    Eol.AUTO: "any type",
}

_EOL_ARGS = {
    "r": Eol.R,
    "mac": Eol.R,
    "n": Eol.N,
    "unix": Eol.N,
    "nr": Eol.NR,
    "rn": Eol.RN,
    "pc": Eol.RN,
    "auto": Eol.AUTO,
    "any": Eol.AUTO,
    "4x4": Eol.AUTO,
}


def eol_to_string(eol: Eol) -> str:
    """Human readable description of an end-of-line convention."""
    return _EOL_STRINGS[eol]


def eol_from_option(option: str, arg: str) -> Eol:
    """Resolve the argument of OPTION, accepting unambiguous abbreviations."""
    if arg in _EOL_ARGS:
        return _EOL_ARGS[arg]
    found = {value for key, value in _EOL_ARGS.items() if key.startswith(arg)}
    valid = ", ".join(f"`{key}'" for key in _EOL_ARGS)
    if not found:
        raise ValueError(
            f"invalid argument `{arg}' for `{option}'; valid arguments are: {valid}"
        )
    if len(found) > 1:
        raise ValueError(
            f"ambiguous argument `{arg}' for `{option}'; valid arguments are: {valid}"
        )
    return found.pop()


class LineBuffer:
    """Reads lines from a byte string, then from a stream, normalising EOLs to ``\\n``.

    After each ``read_line`` the ``content`` attribute holds the raw line,
    ``value`` its lower-case version when ``lower_case`` is set, ``line``
    the number of lines read and ``curr`` a cursor reset to 0.
    """

    def __init__(
        self,
        stream: Optional[BinaryIO] = None,
        data: Optional[bytes] = None,
        eol: Eol = Eol.AUTO,
        pipe: bool = False,
    ) -> None:
        self.stream = stream
        self.data = bytes(data) if data is not None else None
        self.offset = 0
        self.eol = eol
        self.pipe = pipe
        self.lower_case = False
        self.content = b""
        self.value = b""
        self.line = 0
        self.curr = 0
        self._pending: list[int] = []

    @classmethod
    def from_bytes(cls, data: bytes, eol: Eol = Eol.AUTO) -> LineBuffer:
        """A buffer reading from DATA only."""
        return cls(data=data, eol=eol)

    @classmethod
    def from_stream(
        cls, stream: BinaryIO, eol: Eol = Eol.AUTO, pipe: bool = False
    ) -> LineBuffer:
        """A buffer reading from a binary STREAM."""
        return cls(stream=stream, eol=eol, pipe=pipe)

    def __len__(self) -> int:
        return len(self.content)

    # Character sources

    def _data_getc(self) -> Optional[int]:
        assert self.data is not None
        if self.offset < len(self.data):
            c = self.data[self.offset]
            self.offset += 1
            return c
        return None

    def _data_ungetc(self, c: Optional[int]) -> None:
        if c is not None:
            self.offset -= 1

    def _stream_getc(self) -> Optional[int]:
        if self._pending:
            return self._pending.pop()
        assert self.stream is not None
        chunk = self.stream.read(1)
        return chunk[0] if chunk else None

    def _stream_ungetc(self, c: Optional[int]) -> None:
        if c is not None:
            self._pending.append(c)

    def _scan(
        self,
        out: bytearray,
        getc: Callable[[], Optional[int]],
        ungetc: Callable[[Optional[int]], None],
    ) -> bool:
        """Append one line to OUT; return True if an end of line was met."""
        eol = self.eol
        while (c := getc()) is not None:
            if c == _LF:
                if eol in (Eol.R, Eol.RN):
                    out.append(c)
                    continue
                if eol is Eol.AUTO:
                    d = getc()
                    if d != _CR:
                        ungetc(d)
                elif eol is Eol.NR:
                    d = getc()
                    if d != _CR:
                        ungetc(d)
                        out.append(c)
                        continue
                out.append(_LF)
                return True
            if c == _CR:
                if eol in (Eol.N, Eol.NR):
                    out.append(c)
                    continue
                if eol is Eol.AUTO:
                    d = getc()
                    if d != _LF:
                        ungetc(d)
                elif eol is Eol.RN:
                    d = getc()
                    if d != _LF:
                        ungetc(d)
                        out.append(c)
                        continue
                out.append(_LF)
                return True
            out.append(c)
        return False

    # Public reading interface

    def read_line(self) -> bytes:
        """Read the next line; an empty result means end of input."""
        out = bytearray()
        ended = False
        if self.data is not None and self.offset < len(self.data):
            ended = self._scan(out, self._data_getc, self._data_ungetc)
        if self.stream is not None and not ended:
            self._scan(out, self._stream_getc, self._stream_ungetc)

        self.line += 1

        # A form feed before the end of line: drop the last char so that the
        # next page does not start with a blank line.
        if len(out) >= 2 and out[-2] == _FF:
            del out[-1]

        self.content = bytes(out)
        self.value = self.content.lower() if self.lower_case else self.content
        self.curr = 0
        return self.content

    def __iter__(self) -> Iterator[bytes]:
        while line := self.read_line():
            yield line

    def is_empty(self) -> bool:
        """True when the cursor has consumed the current line."""
        return self.curr >= len(self.content)

    def sample(self, path: str, size: int = SAMPLE_SIZE) -> bytes:
        """Copy up to SIZE bytes of the stream into PATH and keep them for reading."""
        if self.stream is None:
            raise ValueError("buffer has no stream to sample")
        sample = bytearray()
        while len(sample) < size and (c := self._stream_getc()) is not None:
            sample.append(c)
        with open(path, "wb") as out:
            out.write(sample)
        self.data = bytes(sample)
        self.offset = 0
        return self.data

    def save(self, path: str) -> None:
        """Write the whole byte string, then the rest of the stream, into PATH."""
        with open(path, "wb") as out:
            if self.data is not None:
                out.write(self.data)
            if self.stream is not None:
                out.write(bytes(reversed(self._pending)))
                self._pending.clear()
                shutil.copyfileobj(self.stream, out)

    def describe(self) -> str:
        """A debugging description of the buffer state."""
        parts = []
        if self.data is not None:
            parts.append(f"A string buffer.  Bufoffset {self.offset}\n")
        if self.stream is not None:
            kind = "pipe" if self.pipe else "file"
            parts.append(f"A stream buffer ({kind}).\n")
        parts.append(
            f"Len = {len(self.content)}, Lower case = {int(self.lower_case)}, "
            f"Line = {self.line}\n"
        )
        if self.content:
            parts.append(f"Content = `{self.content.decode('latin-1')}'\n")
        return "".join(parts)