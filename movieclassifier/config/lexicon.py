"""Lexicon source configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieclassifier.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "lexicon")


class LexiconConfig(BaseSettings):
    """How the lexicon file is read."""
    model_config = SettingsConfigDict(
        env_prefix='LEXICON_',
        case_sensitive=False
    )

    delimiter: str = Field(
        default_factory=lambda: _get_config().get('delimiter', ';')
    )
    encoding: str = Field(
        default_factory=lambda: _get_config().get('encoding', 'utf-8')
    )

    @field_validator('delimiter')
    @classmethod
    def single_character(cls, v: str) -> str:
        """csv.reader only accepts one-character delimiters."""
        if len(v) != 1:
            raise ValueError(f"Lexicon delimiter must be a single character, got {v!r}")
        return v
