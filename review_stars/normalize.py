"""
Tokenization helpers.

WHAT:
  - whitespace split, trim surrounding punctuation, lowercase.

WHY:
  - "Great!!!" and "great" must hit the same lexicon key; inner punctuation
    ("don't", "well-known") is left alone.
"""

import re
from typing import Iterator, Iterable

PUNCT_CHARS = ".,!?:;\"()[]{}-"
WS_RE = re.compile(r"\s+")

def clean_token(tok: str) -> str:
    return (tok or "").strip(PUNCT_CHARS).lower()

def split_words(text: str) -> list:
    return [t for t in WS_RE.split(text or "") if t]

def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield cleaned, non-empty tokens from an iterable of text lines."""
    for line in lines:
        for raw in split_words(line):
            tok = clean_token(raw)
            if tok:
                yield tok
