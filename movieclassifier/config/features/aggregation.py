"""Feature aggregation configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieclassifier.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "aggregation")


class AggregationConfig(BaseSettings):
    """Token filtering and counting settings."""
    model_config = SettingsConfigDict(
        env_prefix='AGGREGATION_',
        case_sensitive=False
    )

    min_token_length: int = Field(
        default_factory=lambda: _get_config().get('min_token_length', 3),
        ge=1
    )
    negated_policy: Literal["ignore", "flip", "drop"] = Field(
        default_factory=lambda: _get_config().get('negated_policy', 'ignore')
    )
