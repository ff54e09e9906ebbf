"""String helpers: word splitting with quote awareness and ASCII case-insensitive comparison."""

from __future__ import annotations

_BREAK = "\n"


def _collapse(text: str, separators: str, quotes: str) -> str:
    """Replace each run of separators with a line break, leaving quoted parts intact.

    A quoted part starts with any character of ``quotes`` and ends with the
    same character.  Opening a quote does not reset the "after separator"
    state, so a separator right after a closing quote does not start a new word.
    """
    out: list[str] = []
    after_separator = False
    closing: str | None = None
    for char in text:
        if closing is not None:
            out.append(char)
            if char == closing:
                closing = None
        elif char in quotes:
            closing = char
            out.append(char)
        elif char in separators:
            if not after_separator:
                after_separator = True
                out.append(_BREAK)
        else:
            after_separator = False
            out.append(char)
    return "".join(out)


def _segments(collapsed: str) -> tuple[list[str], bool]:
    """Split a collapsed string into words.

    Returns the words and whether the last word reaches the end of the text
    (rather than being closed by a trailing break).
    """
    body = collapsed[1:] if collapsed.startswith(_BREAK) else collapsed
    if not body:
        return [], False
    open_end = not body.endswith(_BREAK)
    if not open_end:
        body = body[:-1]
    return body.split(_BREAK), open_end


def split_words(text: str, separators: str) -> list[str]:
    """Split ``text`` on any of ``separators``, keeping double-quoted parts whole.

    A leading double quote is dropped from every word; a trailing one only
    from a final word that runs to the end of the text.
    """
    words, open_end = _segments(_collapse(text, separators, '"'))
    result = [word[1:] if word.startswith('"') else word for word in words]
    if open_end and words and words[-1].endswith('"'):
        result[-1] = result[-1][:-1]
    return result


def split_command_line(text: str, separators: str) -> list[str]:
    """Split a command line on ``separators``; single and double quoted parts stay whole."""
    words, _ = _segments(_collapse(text, separators, "\"'"))
    return words


def _lower(char: str) -> str:
    return chr(ord(char) + 32) if "A" <= char <= "Z" else char


def compare_nocase(first: str, second: str) -> int:
    """Compare two strings ignoring ASCII case; negative, zero or positive like strcmp."""
    for left, right in zip(first, second):
        a, b = _lower(left), _lower(right)
        if a != b:
            return ord(a) - ord(b)
    shared = min(len(first), len(second))
    tail_first = ord(first[shared]) if shared < len(first) else 0
    tail_second = ord(second[shared]) if shared < len(second) else 0
    return tail_first - tail_second


def compare_nocase_prefix(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` leading characters ignoring ASCII case.

    Stops without a difference as soon as either string ends, so a string
    that is a prefix of the other compares equal.
    """
    for index, (left, right) in enumerate(zip(first, second)):
        if index == n:
            break
        a, b = _lower(left), _lower(right)
        if a != b:
            return ord(a) - ord(b)
    return 0