"""Removal of quoting characters (inhibitors) from a command word."""

from __future__ import annotations

QUOTES = "'\""


class UnmatchedQuoteError(ValueError):
    """Raised when a quote is opened and never closed."""

    def __init__(self, quote: str) -> None:
        super().__init__(f"Unmatched '{quote}'.")
        self.quote = quote


def strip_inhibitors(command: str) -> str:
    """Return ``command`` without its enclosing quote characters.

    Inside a quoted part the other kind of quote is kept as an ordinary
    character.  Raises UnmatchedQuoteError when a quote is left open.
    """
    out: list[str] = []
    quote: str | None = None
    for char in command:
        if char in QUOTES and (quote is None or quote == char):
            quote = None if quote is not None else char
            continue
        out.append(char)
    if quote is not None:
        raise UnmatchedQuoteError(quote)
    return "".join(out)