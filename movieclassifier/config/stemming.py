"""Stemmer configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieclassifier.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "stemming")


class StemmingConfig(BaseSettings):
    """Stemmer selection settings."""
    model_config = SettingsConfigDict(
        env_prefix='STEMMING_',
        case_sensitive=False
    )

    enabled: bool = Field(
        default_factory=lambda: _get_config().get('enabled', True)
    )
    language: str = Field(
        default_factory=lambda: _get_config().get('language', 'english')
    )
