from __future__ import annotations

from core.comments import escape_comments, strip_comments


def test_strips_trailing_comment() -> None:
    assert strip_comments("spam; old rule") == "spam"


def test_keeps_whitespace_before_comment() -> None:
    assert strip_comments("pattern  ; comment") == "pattern  "


def test_empty_and_comment_only_lines() -> None:
    assert strip_comments("") == ""
    assert strip_comments(";") == ""
    assert strip_comments("; Sample comment") == ""


def test_line_without_comment_is_unchanged() -> None:
    assert strip_comments("  /\\bTop [0-9]+/i  ") == "  /\\bTop [0-9]+/i  "


def test_truncates_at_first_unescaped_semicolon() -> None:
    assert strip_comments("a; b; c") == "a"


def test_semicolons_inside_regex_literal_are_kept() -> None:
    assert strip_comments("/;[0-9]+/; comment") == "/;[0-9]+/"


def test_escaped_slash_does_not_close_regex() -> None:
    assert strip_comments("/a\\/;b/i ; note") == "/a\\/;b/i "


def test_unclosed_regex_falls_back_to_plain_scanning() -> None:
    assert strip_comments("/abc;def") == "/abc"


def test_escaped_semicolons_collapse() -> None:
    assert strip_comments("foo\\;bar\\;baz; comment") == "foo;bar;baz"
    assert strip_comments("a\\;b") == "a;b"


def test_indented_regex_literal_keeps_semicolons() -> None:
    assert strip_comments("    /x;y/ ; child") == "    /x;y/ "


def test_multibyte_characters_do_not_shift_indices() -> None:
    assert strip_comments("😀😀 party\\; time; emoji") == "😀😀 party; time"


def test_escape_comments_protects_semicolons() -> None:
    assert escape_comments("buy now; limited") == "buy now\\; limited"
    assert escape_comments("/a;b/ ; note") == "/a;b/ \\; note"


def test_escape_comments_is_undone_by_strip_comments() -> None:
    for line in ("a;b;c", "a\\;b", "/x/y;z/", "  /k;v/i ; tail", "/open;ended"):
        assert strip_comments(escape_comments(line)) == line
