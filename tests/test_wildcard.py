import pytest

from dosfloppy.wildcard import match, match_capture


@pytest.mark.parametrize(
    "string,pattern,expected",
    [
        ("readme.txt", "*.TXT", True),
        ("readme.txt", "*.doc", False),
        ("ABC", "abc", True),
        ("abc", "a?c", True),
        ("ac", "a?c", False),
        ("", "?", False),
        ("", "*", True),
        ("anything", "*", True),
        ("a", "a*", True),
        ("bx", "[a-c]x", True),
        ("dx", "[a-c]x", False),
        ("dx", "[^a-c]x", True),
        ("bx", "[^a-c]x", False),
        ("-", "[a-]", True),
        ("a", "[a-]", True),
        ("b", "[a-]", False),
        ("C", "[b-d]", True),
        ("a*", "a\\*", True),
        ("ab", "a\\*", False),
        ("abc", "ab", False),
        ("", "[a]", False),
    ],
)
def test_match(string, pattern, expected):
    assert match(string, pattern) is expected


def test_length_limits_pattern():
    assert match("ab", "abX", 2)
    assert not match("abc", "abX", 2)
    assert not match("ab", "abX")


def test_capture_takes_literal_case_from_pattern():
    assert match_capture("readme.txt", "*.TXT") == "readme.TXT"


def test_capture_range_reports_matching_case():
    assert match_capture("C", "[b-d]") == "c"


def test_capture_no_match():
    assert match_capture("readme.txt", "*.doc") is None


def test_capture_is_case_insensitive_equal():
    for string, pattern in [("FooBar.c", "f*r.C"), ("x1", "?1"), ("abc", "a*")]:
        captured = match_capture(string, pattern)
        assert captured is not None
        assert captured.upper() == string.upper()