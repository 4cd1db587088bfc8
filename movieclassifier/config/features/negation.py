"""Negation scope configuration."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieclassifier.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "negation")


class NegationConfig(BaseSettings):
    """
    Negation scope settings.
    Loads from configs/config.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='NEGATION_',
        case_sensitive=False
    )

    markers: List[str] = Field(
        default_factory=lambda: _get_config().get('markers', ["n't", "not"])
    )
    prefix: str = Field(
        default_factory=lambda: _get_config().get('prefix', "NOT_")
    )

    @field_validator('markers')
    @classmethod
    def markers_not_empty(cls, v: List[str]) -> List[str]:
        """Empty markers would match between every character."""
        if any(not marker for marker in v):
            raise ValueError("Negation markers must be non-empty strings")
        return v

    @field_validator('prefix')
    @classmethod
    def prefix_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Negation prefix cannot be empty")
        return v
