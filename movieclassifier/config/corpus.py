"""Review corpus configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieclassifier.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "corpus")


class CorpusConfig(BaseSettings):
    """Layout and decoding of the labeled review corpus."""
    model_config = SettingsConfigDict(
        env_prefix='CORPUS_',
        case_sensitive=False
    )

    positive_dir: str = Field(
        default_factory=lambda: _get_config().get('positive_dir', 'pos')
    )
    negative_dir: str = Field(
        default_factory=lambda: _get_config().get('negative_dir', 'neg')
    )
    encoding: str = Field(
        default_factory=lambda: _get_config().get('encoding', 'utf-8')
    )
    workers: int = Field(
        default_factory=lambda: _get_config().get('workers', 1),
        ge=1
    )
