# textprint

`textprint` holds the pieces that sit between an input file and a text
printer that produces PostScript:

- **`textprint.buffer`**: reads input line by line from a byte string, a
  binary stream, or both (the string first, then the stream), and turns
  any end-of-line convention (`\r`, `\n`, `\r\n`, `\n\r`, or any of them)
  into `\n`.
- **`textprint.select`**: the sheets map, which picks a style sheet key
  for a file from its name or from the verdict of a `file`-like command.
- **`textprint.delegate`**: delegations ("hand `roff` files to `groff`
  to get PostScript"), parsed from configuration lines, looked up by
  contract, run as shell commands, and the scan of the PostScript they
  produce.
- **`textprint.generate`**: what kind of processing a file type asks for,
  and the report lines printed after a file or a whole job.
- **`textprint.versions`**: `major.minor[letter]` version numbers.

The package has no dependencies outside the standard library.

## Reading lines

```python
from textprint.buffer import LineBuffer, eol_from_option

eol = eol_from_option("--end-of-line", "any")
buffer = LineBuffer.from_bytes(b"first\r\nsecond\rthird\n", eol)
for line in buffer:
    print(line)   # b'first\n', b'second\n', b'third\n'
```

`eol_from_option` accepts `r`/`mac`, `n`/`unix`, `nr`, `rn`/`pc` and
`auto`/`any`/`4x4`, as well as unambiguous abbreviations of them; other
arguments raise `ValueError`. `eol_to_string` gives a readable name for
an `Eol` value.

`LineBuffer.read_line` returns the next line, or `b""` at the end of the
input. After each call, `content` holds the line, `line` the number of
lines read, and `value` the line in lower case when `lower_case` is set
(otherwise the line itself). A form feed just before the end of a line
drops that end of line, so that a new page does not start with a blank
line.

For stream buffers, `sample(path, size=512)` copies the first bytes of
the stream into a file and keeps them to be read first; `save(path)`
writes everything the buffer still holds (the kept bytes, then the rest
of the stream) to a file. `describe()` returns a debugging summary.

## Choosing a style sheet

```python
from textprint.select import SheetsMap, file_verdict

sheets = SheetsMap()
sheets.add("*.c", False, False, "c")
sheets.add("*.py", False, True, "python")
sheets.add("*shell script*", True, False, "sh")

print(sheets.get_command("main.c", None))     # c
print(sheets.get_command("TOOL.PY", None))    # python
print(sheets.get_command("notes.txt", None))  # plain

verdict = file_verdict("file", "install")      # runs: file 'install'
print(sheets.get_command("install", verdict))
```

Rules are tried from the most recently added to the oldest. Name rules
match the file name with shell-style patterns (against its lower-case
form when the rule is case insensitive); verdict rules match the answer
of the file command. When nothing matches, the answer is `plain`.
`file_verdict` returns `None` when no command is given or it says
nothing; `shell_escape` quotes a name for use between single quotes.

## Delegations

```python
from textprint.delegate import DelegationTable, run_delegation

table = DelegationTable()
table.add_line("printrc", 12, "Groff roff:ps groff -man $f")
contract = table.get_subcontract("roff", "ps")
print(contract.describe())
# Delegation `Groff', from roff to ps
# 	groff -man $f

print(table.names())       # ['Groff']
print(table.list_long())
```

A delegation line is `<name> <source type>:<destination type> <command>`;
a missing part raises `DelegationError`. A later delegation with the same
contract replaces an earlier one.

`run_delegation(command, output_path, pages_per_sheet=1)` runs a command
through the shell, copies its output unchanged to `output_path`, and
returns a `DelegationReport` with the lines read, the pages and sheets
counted from `%%Page:` comments, and the resources listed by
`%%DocumentNeededResources:` (and its `%%+` continuations). It raises
`DelegationError` if the output file cannot be created, the command
cannot be started, or the command produces nothing.
`scan_delegated_output(lines, pages_per_sheet=1)` does the same scan on
lines you already have.

## Reports

```python
from textprint.generate import file_pages_message, job_pages_message, string_to_style_kind

print(string_to_style_kind("binary"))   # StyleKind.BINARY
print(string_to_style_kind("python"))   # StyleKind.SSHPARSER
print(file_pages_message("notes.txt", "plain", 3, 2), end="")
# [notes.txt (plain): 3 pages on 2 sheets]
print(job_pages_message(4, 4, duplex=True, destination="sent to the printer"), end="")
# [Total: 4 pages on 2 sheets] sent to the printer
```

`lines_wrapped_message` and `nothing_printed_message` give the remaining
report lines.

## Version numbers

```python
from textprint.versions import parse_version

total = parse_version("1.2") + parse_version("0.3")
print(total)                            # 1.5
print(parse_version("4.13b").letter)    # 2
```

Anything that does not start with `digits.digits` raises
`InvalidVersionError`.

## What this package does not do

`textprint` does not produce PostScript, has no command-line program,
and does not read or parse style sheet files: it provides the line
reading, file-type selection, delegation and reporting that such a
program is built from. Style sheet keys returned by `SheetsMap` are plain
strings for the caller to resolve.