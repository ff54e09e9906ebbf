"""Build the binary tree of operators that drives command execution."""

from __future__ import annotations

from dataclasses import dataclass

REDIRECTORS = (">", ">>", "<", "<<", "|", "2>", "(")
_OPERATOR_CHARS = frozenset(redirector[-1] for redirector in REDIRECTORS)


@dataclass
class Node:
    """A tree node: an operator with two operands, or a plain command at a leaf."""

    item: str
    left: Node | None = None
    right: Node | None = None


def _char(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _is_operator(text: str, index: int) -> bool:
    return index >= 0 and _char(text, index) in _OPERATOR_CHARS


def _is_last_redirect(text: str, index: int) -> bool:
    if index - 1 <= 0:
        return False
    return not any(_is_operator(text, j) for j in range(index - 1, -1, -1))


def _skip_parenthesis(text: str, index: int) -> int:
    if _char(text, index) == ")":
        while index > 0 and text[index - 1] != "(":
            index -= 1
        if _is_last_redirect(text, index - 1):
            index -= 2
    return index


def _operator_at(text: str, index: int) -> str:
    length = 1
    if index > 0 and text[index - 1] == text[index]:
        length += 1
    if text[index] == ">" and index > 0 and text[index - 1] == "2":
        length += 1
    return text[index - length + 1:index + 1]


def fill_tree(commands: str) -> Node:
    """Parse a command into a left-deep tree, splitting on operators from right to left.

    Each operator node holds the text after the operator on its right and the
    remaining text on its left.  An operand left empty after a split shares
    the remaining text, as does every leaf still holding it.
    """
    top = Node(commands)
    text = commands
    root = top
    shared = [top]
    index = len(commands) - 1
    while index >= 0:
        index = _skip_parenthesis(text, index)
        if _is_operator(text, index):
            operator = _operator_at(text, index)
            right = Node(text[index + 1:].lstrip(" \t"))
            cut = index - 1 if index > 0 and text[index - 1] in "><2" else index
            text = text[:cut]
            left = Node(text)
            root.item, root.left, root.right = operator, left, right
            shared = [node for node in shared if node is not root]
            shared.append(left)
            right_shared = not right.item
            if right_shared:
                shared.append(right)
            if operator == "(":
                if right_shared:
                    text = text.partition(")")[0]
                else:
                    right.item = right.item.partition(")")[0]
            root = left
        index -= 1
    for node in shared:
        node.item = text
    return top