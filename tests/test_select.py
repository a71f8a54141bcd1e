from textprint.select import PatternRule, SheetsMap, file_verdict, shell_escape


def test_shell_escape_quotes():
    assert shell_escape("it's") == "it'\\''s"


def test_shell_escape_leaves_plain_names():
    assert shell_escape("dir/file name.c") == "dir/file name.c"


def test_pattern_rule_str():
    assert str(PatternRule("*.c", "c")) == "name/*.c: c/"
    assert str(PatternRule("*script*", "sh", True, True)) == "file/*script*: sh/i"


def test_empty_map_gives_plain():
    sheets = SheetsMap()
    assert len(sheets) == 0
    assert sheets.get_command("foo.c") == "plain"


def test_name_rule_matches():
    sheets = SheetsMap()
    sheets.add("*.c", False, False, "c")
    assert len(sheets) == 1
    assert sheets.get_command("foo.c") == "c"
    assert sheets.get_command("foo.h") == "plain"


def test_latest_rule_wins():
    sheets = SheetsMap()
    sheets.add("*.c", False, False, "c")
    sheets.add("*.c", False, False, "cxx")
    assert sheets.get_command("main.c") == "cxx"


def test_case_sensitivity():
    sheets = SheetsMap()
    sheets.add("*.c", False, False, "c")
    assert sheets.get_command("MAIN.C") == "plain"
    sheets.add("*.c", False, True, "c-insensitive")
    assert sheets.get_command("MAIN.C") == "c-insensitive"


def test_verdict_rules_need_a_verdict():
    sheets = SheetsMap()
    sheets.add("*shell script*", True, False, "sh")
    assert sheets.get_command("run") == "plain"
    assert sheets.get_command("run", "Bourne shell script text") == "sh"
    assert sheets.get_command("run", "") == "plain"


def test_verdict_rule_does_not_match_name():
    sheets = SheetsMap()
    sheets.add("*.c", True, False, "c")
    assert sheets.get_command("foo.c", "ASCII text") == "plain"


def test_no_name_only_uses_verdict():
    sheets = SheetsMap()
    sheets.add("*", False, False, "anything")
    sheets.add("data", True, False, "binary")
    assert sheets.get_command(None, "data") == "binary"
    sheets2 = SheetsMap()
    sheets2.add("*", False, False, "anything")
    assert sheets2.get_command(None, None) == "plain"


def test_file_verdict_without_command():
    assert file_verdict("", "foo") is None
    assert file_verdict(None, "foo") is None


def test_file_verdict_parses_answer():
    assert file_verdict("echo", "foo: ASCII text") == "ASCII text"


def test_file_verdict_with_quote_in_name():
    assert file_verdict("echo", "it's:\tdata") == "data"


def test_file_verdict_without_colon():
    assert file_verdict("echo", "no colon here") is None


def test_file_verdict_without_output():
    assert file_verdict("true", "foo") is None