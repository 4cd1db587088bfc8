"""
Negation Scoper

Rewrites review text so every word inside the scope of a negation marker
carries a prefix:

    "i did n't like it , but ..."  ->  "i did NOT_like NOT_it , but ..."

A scope opens right after a marker ("not", "n't"), which is consumed, and
closes at the first standalone punctuation token (". , ! ? -"). Words without
letters keep their form and do not close the scope.
"""

import re
import string
from functools import lru_cache
from typing import Collection, FrozenSet, Pattern

DEFAULT_NEGATION_MARKERS: FrozenSet[str] = frozenset({"n't", "not"})
DEFAULT_NEGATION_PREFIX = "NOT_"
PUNCTUATION_TOKENS: FrozenSet[str] = frozenset({".", ",", "!", "?", "-"})

_ASCII_LETTERS = frozenset(string.ascii_letters)


def is_word_token(token: str) -> bool:
    """True if the token contains at least one ASCII letter."""
    return any(ch in _ASCII_LETTERS for ch in token)


def is_punctuation_token(token: str) -> bool:
    """True if the whole token is one scope-ending punctuation mark."""
    return token in PUNCTUATION_TOKENS


@lru_cache(maxsize=32)
def _marker_pattern(markers: FrozenSet[str]) -> Pattern[str]:
    # longest first so "n't" is not shadowed by a shorter overlapping marker
    ordered = sorted(markers, key=lambda m: (-len(m), m))
    return re.compile("|".join(re.escape(m) for m in ordered))


def apply_negation_scope(
    text: str,
    markers: Collection[str] = DEFAULT_NEGATION_MARKERS,
    prefix: str = DEFAULT_NEGATION_PREFIX,
) -> str:
    """
    Prefix every word inside a negation scope.

    Args:
        text: Review text (whitespace separated, punctuation as own tokens)
        markers: Substrings that open a negation scope
        prefix: Tag prepended to negated words

    Returns:
        Rewritten text joined with single spaces, or ``text`` itself when no
        marker occurs in it.
    """
    markers = frozenset(m for m in markers if m)
    if not markers:
        return text

    pattern = _marker_pattern(markers)
    if pattern.search(text) is None:
        return text

    rewritten = []
    in_scope = False
    for word in text.split():
        # pieces[1:] each follow a marker occurrence
        for idx, piece in enumerate(pattern.split(word)):
            if idx > 0:
                in_scope = True
            if not piece:
                continue
            if in_scope and is_punctuation_token(piece):
                in_scope = False
            elif in_scope and is_word_token(piece):
                piece = prefix + piece
            rewritten.append(piece)

    return " ".join(rewritten)
