"""
Connotation Feature Aggregator

This module turns (negation-tagged) review text into a FeatureRecord:

1. Splits text on whitespace
2. Strips the negation prefix and remembers it
3. Normalizes tokens the same way lexicon entries are normalized
4. Looks each token up in the ConnotationTable
5. Counts positive / negative / strong / weak hits

Usage:
    from movieclassifier.features.connotation import Label, extract

    record = extract("a NOT_good film", Label.NEGATIVE, table)
    print(record.to_row())
"""

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Tuple, Union

from movieclassifier.lexicon.constants import TRACKED_CONNOTATIONS
from movieclassifier.lexicon.normalizer import normalize_entry
from movieclassifier.lexicon.schemas import ConnotationTable, WordConnotation

from .negation import DEFAULT_NEGATION_PREFIX

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3
"""Tokens shorter than this are treated as noise and never looked up."""

FEATURE_COLUMNS: Tuple[str, ...] = (*TRACKED_CONNOTATIONS, "label")
"""Tabular header of a FeatureRecord; the label (class) comes last."""


class Label(str, Enum):
    """Class of a training document."""
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class NegatedHitPolicy(str, Enum):
    """What a lexicon hit on a negated token contributes."""
    IGNORE = "ignore"   # counted like any other hit
    FLIP = "flip"       # positive and negative swap
    DROP = "drop"       # not counted


@dataclass
class FeatureRecord:
    """
    Connotation counts of one document plus its label.

    Counters only grow through add_occurrence() while the record is being
    built; extract() freezes the record before returning it.
    """
    label: Label
    positive: int = 0
    negative: int = 0
    strong: int = 0
    weak: int = 0
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def add_occurrence(self, connotation: WordConnotation, invert_polarity: bool = False) -> None:
        """
        Count one lexicon hit.

        Args:
            connotation: The matched lexicon entry
            invert_polarity: Count positive as negative and vice versa
        """
        if self._frozen:
            raise RuntimeError("FeatureRecord is frozen; counters can no longer change")

        positive, negative = connotation.positive, connotation.negative
        if invert_polarity:
            positive, negative = negative, positive

        if positive:
            self.positive += 1
        if negative:
            self.negative += 1
        if connotation.strong:
            self.strong += 1
        if connotation.weak:
            self.weak += 1

    def freeze(self) -> "FeatureRecord":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @staticmethod
    def titles() -> List[str]:
        """Column names matching to_row()."""
        return list(FEATURE_COLUMNS)

    def to_row(self) -> List[Union[int, str]]:
        """Tabular form: counters in FEATURE_COLUMNS order, label last."""
        return [self.positive, self.negative, self.strong, self.weak, self.label.value]

    def to_dict(self) -> Dict[str, Union[int, str]]:
        """Convert to dictionary."""
        data = asdict(self)
        data.pop("_frozen")
        data["label"] = self.label.value
        return data

    def total(self) -> int:
        """Sum of all counters."""
        return self.positive + self.negative + self.strong + self.weak


def strip_negation(token: str, prefix: str = DEFAULT_NEGATION_PREFIX) -> Tuple[str, bool]:
    """
    Remove a leading negation prefix.

    Returns:
        (token without prefix, whether the prefix was present)
    """
    if prefix and token.startswith(prefix):
        return token[len(prefix):], True
    return token, False


def extract(
    text: str,
    label: Label,
    table: ConnotationTable,
    negation_prefix: str = DEFAULT_NEGATION_PREFIX,
    min_token_length: int = MIN_TOKEN_LENGTH,
    negated_policy: Union[NegatedHitPolicy, str] = NegatedHitPolicy.IGNORE,
) -> FeatureRecord:
    """
    Extract connotation counts from text.

    Args:
        text: Stemmed, negation-tagged review text
        label: Class of the document
        table: Lexicon lookup table (read only)
        negation_prefix: Prefix marking negated tokens
        min_token_length: Shorter tokens are skipped
        negated_policy: How hits on negated tokens are counted

    Returns:
        Frozen FeatureRecord
    """
    policy = NegatedHitPolicy(negated_policy)
    record = FeatureRecord(label=label)

    for token in text.split():
        token, negated = strip_negation(token, negation_prefix)
        word = normalize_entry(token)
        if len(word) < min_token_length or word not in table:
            continue

        if negated and policy is NegatedHitPolicy.DROP:
            continue
        record.add_occurrence(
            table[word],
            invert_polarity=negated and policy is NegatedHitPolicy.FLIP,
        )

    return record.freeze()
