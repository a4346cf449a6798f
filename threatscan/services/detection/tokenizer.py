"""Tokenization and normalization for keyword matching."""

from __future__ import annotations

import re
from typing import List, Sequence

# ASCII punctuation plus Devanagari danda and Urdu full stop, comma, question mark
PUNCTUATION = ".,!?;:()[]{}'\"" + "।॥" + "۔،؟"

_PUNCTUATION_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Split text into tokens.

    Punctuation is replaced by spaces, then the text is split on runs of
    whitespace; empty tokens are dropped. Empty input yields an empty list.
    """
    if not text:
        return []
    cleaned = _PUNCTUATION_RE.sub(" ", text)
    return [token for token in _WHITESPACE_RE.split(cleaned) if token]


def normalize(token: str) -> str:
    """Normalize a token or dictionary entry for comparison.

    Lowercasing only changes cased scripts (Latin); Devanagari and
    Perso-Arabic text passes through unchanged after trimming.
    """
    return token.strip().lower()


def context_window(tokens: Sequence[str], index: int, size: int = 5) -> str:
    """Return up to ``size`` tokens either side of ``index`` joined by spaces."""
    start = max(0, index - size)
    end = min(len(tokens), index + size + 1)
    return " ".join(tokens[start:end])
