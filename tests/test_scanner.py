"""Tests for the format-string scanner."""

from __future__ import annotations

from utilkit._internal.scanner import Piece, scan

TOKENS = ["YYYY", "YY", "MM", "M"]


class TestScan:
    """Tests for scan()."""

    def test_empty_string(self) -> None:
        """Empty format yields nothing."""
        assert list(scan("", TOKENS)) == []

    def test_literal_only(self) -> None:
        """Text without tokens is one literal piece."""
        assert list(scan("abc-/", TOKENS)) == [Piece("abc-/", False)]

    def test_longest_match_wins(self) -> None:
        """YYYY is not read as two YY tokens."""
        assert list(scan("YYYY", TOKENS)) == [Piece("YYYY", True)]

    def test_longest_match_independent_of_order(self) -> None:
        """Token order passed in does not matter."""
        assert list(scan("MM", ["M", "MM"])) == [Piece("MM", True)]

    def test_remainder_after_longest(self) -> None:
        """Three Ms are MM followed by M."""
        assert list(scan("MMM", TOKENS)) == [Piece("MM", True), Piece("M", True)]

    def test_unmatched_run_is_literal(self) -> None:
        """A lone Y is literal and merges with its neighbours."""
        assert list(scan("xYz", TOKENS)) == [Piece("xYz", False)]

    def test_mixed(self) -> None:
        """Tokens and literals alternate."""
        assert list(scan("YY/M-", TOKENS)) == [
            Piece("YY", True),
            Piece("/", False),
            Piece("M", True),
            Piece("-", False),
        ]

    def test_escape(self) -> None:
        """Escaped characters are literal and the escape is dropped."""
        assert list(scan("\\MM", TOKENS, escape="\\")) == [
            Piece("M", False),
            Piece("M", True),
        ]

    def test_escaped_escape(self) -> None:
        """A doubled escape yields one literal escape character."""
        assert list(scan("\\\\", TOKENS, escape="\\")) == [Piece("\\", False)]

    def test_trailing_escape(self) -> None:
        """A trailing escape is kept as a literal."""
        assert list(scan("M\\", TOKENS, escape="\\")) == [
            Piece("M", True),
            Piece("\\", False),
        ]

    def test_no_escape_by_default(self) -> None:
        """Without an escape character a backslash is plain text."""
        assert list(scan("\\M", TOKENS)) == [Piece("\\", False), Piece("M", True)]
