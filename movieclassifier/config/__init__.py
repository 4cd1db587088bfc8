"""
Movie review feature generator configuration package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml
3. Automatically override with environment variables from .env

Usage:
    from movieclassifier.config import settings

    # Access paths
    lexicon_path = settings.paths.lexicon_csv

    # Access negation settings
    markers = settings.negation.markers
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Core configs
from movieclassifier.config.paths import PathsConfig
from movieclassifier.config.lexicon import LexiconConfig
from movieclassifier.config.corpus import CorpusConfig
from movieclassifier.config.stemming import StemmingConfig

# Feature configs
from movieclassifier.config.features import (
    NegationConfig,
    AggregationConfig,
)


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from movieclassifier.config import settings

        settings.paths.corpus_dir
        settings.lexicon.delimiter
        settings.aggregation.min_token_length
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    lexicon: LexiconConfig = Field(default_factory=LexiconConfig)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    stemming: StemmingConfig = Field(default_factory=StemmingConfig)
    negation: NegationConfig = Field(default_factory=NegationConfig)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Utility Functions
# ===========================

ensure_directories = settings.paths.ensure_directories


# ===========================
# Public API
# ===========================

__all__ = [
    # Main settings
    "settings",
    "Settings",
    # Utility
    "ensure_directories",
    # Core configs
    "PathsConfig",
    "LexiconConfig",
    "CorpusConfig",
    "StemmingConfig",
    # Feature configs
    "NegationConfig",
    "AggregationConfig",
]
