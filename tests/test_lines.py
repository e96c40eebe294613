from flexacc.lines import split_into_lines, strip_line_breaks


def test_split_into_lines_drops_blank_lines_and_trims():
    assert split_into_lines("a\n\n  b  \n\n") == ["a", "b"]
    assert split_into_lines("   \n\t\n") == []
    assert split_into_lines("") == []


def test_split_into_lines_prefers_crlf_when_present():
    assert split_into_lines("  a  \r\n b\r\n\r\n") == ["a", "b"]
    # a bare newline inside a CRLF text stays part of its line
    assert split_into_lines("a\r\nb\nc") == ["a", "b\nc"]


def test_split_into_lines_returns_fresh_list():
    text = "one\ntwo"
    first = split_into_lines(text)
    first.clear()
    assert split_into_lines(text) == ["one", "two"]


def test_strip_line_breaks():
    assert strip_line_breaks("a\r\nb\nc") == "abc"
    assert strip_line_breaks("no breaks") == "no breaks"
