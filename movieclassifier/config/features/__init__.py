"""Feature extraction configuration modules."""

from movieclassifier.config.features.negation import NegationConfig
from movieclassifier.config.features.aggregation import AggregationConfig

__all__ = [
    "NegationConfig",
    "AggregationConfig",
]
