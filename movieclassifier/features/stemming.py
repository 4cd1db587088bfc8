"""Stemmer construction for lexicon entries and review text."""

import logging

from nltk.stem import SnowballStemmer

from movieclassifier.lexicon.normalizer import WordFn

logger = logging.getLogger(__name__)


def identity_stem(word: str) -> str:
    """No-op stemmer used when stemming is disabled."""
    return word


def build_stemmer(language: str = "english", enabled: bool = True) -> WordFn:
    """
    Build the stemming function shared by the lexicon and the documents.

    Args:
        language: Snowball language name (e.g. "english")
        enabled: If False, return an identity function

    Returns:
        Callable mapping a word to its stem

    Raises:
        ValueError: If NLTK has no Snowball stemmer for the language
    """
    if not enabled:
        logger.info("Stemming disabled")
        return identity_stem

    lang = (language or "english").lower()
    if lang not in SnowballStemmer.languages:
        raise ValueError(
            f"Unsupported stemmer language: {language}. "
            f"Must be one of {SnowballStemmer.languages}"
        )
    logger.info(f"Using Snowball stemmer ({lang})")
    return SnowballStemmer(lang).stem
