from mysh.tree import Node, fill_tree


def test_plain_command_is_a_leaf():
    tree = fill_tree("ls -l")
    assert tree == Node("ls -l")


def test_empty_command_is_a_leaf():
    assert fill_tree("") == Node("")


def test_pipe_splits_into_two_operands():
    tree = fill_tree("ls | wc -l")
    assert tree.item == "|"
    assert tree.right == Node("wc -l")
    assert tree.left.item.rstrip() == "ls"
    assert tree.left.left is None and tree.left.right is None


def test_append_redirection_uses_two_characters():
    tree = fill_tree("echo a >> out")
    assert tree.item == ">>"
    assert tree.right.item == "out"
    assert tree.left.item.rstrip() == "echo a"


def test_error_redirection():
    tree = fill_tree("cmd 2> err")
    assert tree.item == "2>"
    assert tree.right.item == "err"
    assert tree.left.item.rstrip() == "cmd"


def test_input_redirection():
    tree = fill_tree("sort < data")
    assert tree.item == "<"
    assert tree.right.item == "data"


def test_operators_group_to_the_left():
    tree = fill_tree("a | b | c")
    assert tree.item == "|"
    assert tree.right.item == "c"
    inner = tree.left
    assert inner.item == "|"
    assert inner.right.item == "b "
    assert inner.left.item.rstrip() == "a"


def test_redirect_after_pipe():
    tree = fill_tree("ls | grep x > out")
    assert tree.item == ">"
    assert tree.right.item == "out"
    assert tree.left.item == "|"


def test_parenthesis_alone():
    tree = fill_tree("(ls)")
    assert tree.item == "("
    assert tree.right.item == "ls"
    assert tree.left.item == ""


def test_parenthesis_after_pipe_shares_left_operand():
    tree = fill_tree("a | (b)")
    assert tree.item == "("
    assert tree.right.item == "b"
    inner = tree.left
    assert inner.item == "|"
    assert inner.right.item == inner.left.item
    assert inner.left.item.rstrip() == "a"


def test_parenthesis_after_plain_word_is_not_split():
    tree = fill_tree("ab (ls)")
    assert tree == Node("ab (ls)")