"""
Feature Engineering Module

Per-document steps of the review pipeline:
- negation: tag words inside a negation scope
- connotation: count lexicon connotations into a FeatureRecord
- stemming: the stemmer shared with the lexicon

Usage:
    from movieclassifier.features import apply_negation_scope, extract, Label

    text = apply_negation_scope("this is not good", {"not"}, "NOT_")
    record = extract(text, Label.POSITIVE, table)
"""

from .negation import (
    DEFAULT_NEGATION_MARKERS,
    DEFAULT_NEGATION_PREFIX,
    PUNCTUATION_TOKENS,
    apply_negation_scope,
    is_punctuation_token,
    is_word_token,
)
from .connotation import (
    FEATURE_COLUMNS,
    MIN_TOKEN_LENGTH,
    FeatureRecord,
    Label,
    NegatedHitPolicy,
    extract,
    strip_negation,
)
from .stemming import build_stemmer, identity_stem

__all__ = [
    # Negation
    "DEFAULT_NEGATION_MARKERS",
    "DEFAULT_NEGATION_PREFIX",
    "PUNCTUATION_TOKENS",
    "apply_negation_scope",
    "is_punctuation_token",
    "is_word_token",
    # Connotation
    "FEATURE_COLUMNS",
    "MIN_TOKEN_LENGTH",
    "FeatureRecord",
    "Label",
    "NegatedHitPolicy",
    "extract",
    "strip_negation",
    # Stemming
    "build_stemmer",
    "identity_stem",
]
