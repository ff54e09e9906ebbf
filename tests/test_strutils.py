import pytest

from mysh.strutils import (
    compare_nocase,
    compare_nocase_prefix,
    split_command_line,
    split_words,
)


def test_split_words_on_spaces():
    assert split_words("ls -l  /tmp", " ") == ["ls", "-l", "/tmp"]


def test_split_words_ignores_leading_and_trailing_separators():
    assert split_words("  a b ", " ") == ["a", "b"]


@pytest.mark.parametrize("text", ["", "   ", "\t \t"])
def test_split_words_of_blank_text_is_empty(text):
    assert split_words(text, " \t") == []


def test_split_words_keeps_quoted_part_and_strips_quotes():
    assert split_words('say "hello world"', " ") == ["say", "hello world"]


def test_split_words_on_lines():
    assert split_words("one\ntwo\nthree\n", "\n") == ["one", "two", "three"]


def test_split_words_several_separators():
    assert split_words("a:b;c", ":;") == ["a", "b", "c"]


def test_split_words_words_never_contain_separators():
    words = split_words("x  y\tz   w", " \t")
    assert all(" " not in word and "\t" not in word for word in words)
    assert "".join(words) == "xyzw"


def test_split_command_line_keeps_single_quotes():
    assert split_command_line("echo 'a b'", " ") == ["echo", "'a b'"]


def test_split_command_line_quote_closed_only_by_same_kind():
    assert split_command_line('x "it\'s"', " ") == ["x", '"it\'s"']


def test_split_command_line_on_semicolon():
    assert split_command_line("ls; pwd", ";") == ["ls", " pwd"]


def test_split_command_line_empty():
    assert split_command_line("", " ") == []


def test_compare_nocase_equal_ignoring_case():
    assert compare_nocase("HeLLo", "hello") == 0


def test_compare_nocase_orders():
    assert compare_nocase("abc", "abd") < 0
    assert compare_nocase("abd", "ABC") > 0


def test_compare_nocase_shorter_sorts_first():
    assert compare_nocase("ab", "abc") < 0
    assert compare_nocase("abc", "ab") > 0


@pytest.mark.parametrize("pair", [("alias", "ls"), ("cd", "CD"), ("x", "xy")])
def test_compare_nocase_is_antisymmetric(pair):
    first, second = pair
    assert compare_nocase(first, second) == -compare_nocase(second, first)


def test_compare_nocase_prefix_matches_env_style_key():
    assert compare_nocase_prefix("PATH=/bin", "path=", 5) == 0


def test_compare_nocase_prefix_limited_to_n():
    assert compare_nocase_prefix("abx", "aby", 2) == 0
    assert compare_nocase_prefix("abx", "aby", 3) < 0


def test_compare_nocase_prefix_stops_at_shorter_string():
    assert compare_nocase_prefix("ab", "abc", 3) == 0