import shlex
import sys

import pytest

from textprint.delegate import (
    Delegation,
    DelegationError,
    DelegationTable,
    parse_delegation,
    run_delegation,
    scan_delegated_output,
)


def _python_command(code):
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


def test_parse_delegation_fields():
    d = parse_delegation("a2ps.cfg", 3, "PsNup ps:ps psnup -2 $f")
    assert d.name == "PsNup"
    assert d.contract == "ps:ps"
    assert d.command == "psnup -2 $f"
    assert (d.source, d.destination) == ("ps", "ps")


def test_parse_delegation_strips_leading_blanks_and_newline():
    d = parse_delegation("f", 1, "Groff  roff:ps \t groff -man $f\n")
    assert d.command == "groff -man $f"
    assert d.contract == "roff:ps"


def test_missing_argument_message_has_location():
    with pytest.raises(DelegationError) as info:
        parse_delegation("cfg", 7, "Name")
    assert str(info.value).startswith("cfg:7:")


def test_describe_format():
    d = Delegation("PsNup", "ps:ps", "psnup $f")
    assert d.describe() == "Delegation `PsNup', from ps to ps\n\tpsnup $f\n"


def test_table_lookup_and_replace():
    table = DelegationTable()
    first = table.add_line("cfg", 1, "A roff:ps cmd1")
    assert table.get_subcontract("roff", "ps") == first
    assert table.get_subcontract("ps", "roff") is None
    second = table.add_line("cfg", 2, "B roff:ps cmd2")
    assert table.get_subcontract("roff", "ps") == second
    assert len(table) == 1


def test_table_names_sorted():
    table = DelegationTable()
    table.add(Delegation("Zeta", "a:b", "z"))
    table.add(Delegation("Alpha", "c:d", "a"))
    table.add(Delegation("Mid", "e:f", "m"))
    assert table.names() == ["Alpha", "Mid", "Zeta"]


def test_list_long():
    table = DelegationTable()
    b = Delegation("B", "x:y", "cmdb")
    a = Delegation("A", "u:v", "cmda")
    table.add(b)
    table.add(a)
    listing = table.list_long()
    assert listing.startswith("Applications configured for delegation\n")
    assert listing.endswith("\n\n")
    assert listing.index(a.describe()) < listing.index(b.describe())


def test_scan_counts_pages():
    lines = ["%!PS\n", "%%Page: 1 1\n", "x\n", "%%Page: 2 2\n"]
    report = scan_delegated_output(lines, pages_per_sheet=4)
    assert report.sheets == 2
    assert report.pages == 2 * 4
    assert report.lines_read == len(lines)
    assert report.succeeded


def test_scan_needed_resources_with_continuation():
    lines = [
        "%%DocumentNeededResources: font Courier Times-Roman\n",
        "%%+ font Helvetica\n",
    ]
    report = scan_delegated_output(lines)
    assert report.needed_resources == [
        ("font", "Courier"),
        ("font", "Times-Roman"),
        ("font", "Helvetica"),
    ]


def test_scan_atend_and_orphan_continuation():
    report = scan_delegated_output(
        ["%%+ font Ignored\n", "%%DocumentNeededResources: (atend)\n"]
    )
    assert report.needed_resources == []


def test_scan_empty_is_failure():
    report = scan_delegated_output([])
    assert not report.succeeded
    assert report.pages == 0


def test_run_delegation_copies_output(tmp_path):
    out = tmp_path / "out.ps"
    code = "import sys; sys.stdout.write('%!PS\\n%%Page: 1 1\\nshowpage\\n')"
    report = run_delegation(_python_command(code), str(out), pages_per_sheet=2)
    assert out.read_bytes() == b"%!PS\n%%Page: 1 1\nshowpage\n"
    assert report.sheets == 1
    assert report.pages == 2
    assert report.lines_read == 3


def test_run_delegation_no_output(tmp_path):
    out = tmp_path / "out.ps"
    with pytest.raises(DelegationError, match="no output"):
        run_delegation(_python_command("pass"), str(out))


def test_run_delegation_cannot_create(tmp_path):
    missing = tmp_path / "no" / "such" / "out.ps"
    with pytest.raises(DelegationError, match="cannot create file"):
        run_delegation(_python_command("print(1)"), str(missing))