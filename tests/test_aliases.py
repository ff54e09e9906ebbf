import pytest

from mysh.aliases import AliasTable, is_quoted


def test_definition_is_listed_in_parentheses():
    table = AliasTable()
    table.define("ll", ["ls", "-l"])
    assert table.listing() == ["ll\t (ls -l)"]


def test_expand_replaces_leading_shortcut():
    table = AliasTable()
    table.define("ll", ["ls", "-l"])
    assert table.expand("ll -a") == "ls -l -a"


def test_quoted_definition_drops_double_quotes():
    table = AliasTable()
    table.define("x", ['"echo', 'hi"'])
    assert table.expand("x") == "echo hi"


def test_unknown_command_is_not_expanded():
    table = AliasTable()
    table.define("ll", ["ls", "-l"])
    assert table.expand("pwd") == "pwd"


def test_redefinition_replaces_previous():
    table = AliasTable()
    table.define("ll", ["ls"])
    table.define("ll", ["ls", "-la"])
    assert len(table.listing()) == 1
    assert table.expand("ll") == "ls -la"


def test_listing_is_sorted_ignoring_case():
    table = AliasTable()
    for name in ("gamma", "alpha", "Beta"):
        table.define(name, ["true"])
    names = [line.split("\t")[0] for line in table.listing()]
    assert names == ["alpha", "Beta", "gamma"]


def test_remove_deletes_alias():
    table = AliasTable()
    table.define("ll", ["ls"])
    table.remove(["ll", "missing"])
    assert "ll" not in table
    assert table.expand("ll") == "ll"


def test_remove_without_names_raises():
    with pytest.raises(ValueError, match="Too few arguments"):
        AliasTable().remove([])


def test_define_without_words_raises():
    with pytest.raises(ValueError):
        AliasTable().define("ll", [])


@pytest.mark.parametrize(
    "text, expected",
    [("'a b'", True), ('"a b"', True), ("ls", False), ("'a\"", False), ("", False)],
)
def test_is_quoted(text, expected):
    assert is_quoted(text) is expected