"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use synthetic data that runs in <1 second.
"""

import pytest

from movieclassifier.config._loader import clear_config_cache


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Environment overrides must not leak through the YAML cache."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def negated_review() -> str:
    """Pre-tokenized review text as found in the polarity dataset."""
    return "the plot is n't clever , but the acting is not bad at all ."
