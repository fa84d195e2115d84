"""Format-string tokenizer shared by the layout translators.

The scanner walks a format string once, left to right, and splits it into
literal runs and tokens. At each position the longest token that matches
wins, so "MM" is never read as two "M" tokens and "YYYY" is never read as
two "YY" tokens.

Each caller supplies its own token set; the scanner holds no table of its
own. This module is not part of the public API.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple


class Piece(NamedTuple):
    """One run of a scanned format string."""

    text: str
    is_token: bool


def scan(
    fmt: str,
    tokens: Iterable[str],
    *,
    escape: str | None = None,
) -> Iterator[Piece]:
    """Split ``fmt`` into literal and token pieces.

    Args:
        fmt: The format string to scan.
        tokens: The recognized tokens.
        escape: Optional escape character. The character following it is
            emitted as a literal and the escape itself is dropped. A
            trailing escape is kept as a literal.

    Yields:
        Piece tuples in order. Adjacent literal characters are merged.

    Examples:
        >>> list(scan("YY/M", ["YYYY", "YY", "M"]))
        [Piece(text='YY', is_token=True), Piece(text='/', is_token=False), Piece(text='M', is_token=True)]
    """
    # Longest first so that a token is never split by one of its prefixes
    ordered = sorted(set(tokens), key=len, reverse=True)
    literal: list[str] = []
    i = 0
    n = len(fmt)

    while i < n:
        if escape is not None and fmt[i] == escape:
            literal.append(fmt[i + 1] if i + 1 < n else fmt[i])
            i += 2
            continue

        for token in ordered:
            if fmt.startswith(token, i):
                if literal:
                    yield Piece("".join(literal), False)
                    literal = []
                yield Piece(token, True)
                i += len(token)
                break
        else:
            literal.append(fmt[i])
            i += 1

    if literal:
        yield Piece("".join(literal), False)


__all__ = ["Piece", "scan"]
