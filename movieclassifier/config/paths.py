"""Project path configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieclassifier.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "paths")


class PathsConfig(BaseSettings):
    """
    Project path configuration.
    All paths are computed from project_root.
    """
    model_config = SettingsConfigDict(
        env_prefix='PATHS_',
        case_sensitive=False
    )

    # Project root directory (computed)
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    lexicon_filename: str = Field(
        default_factory=lambda: _get_config().get('lexicon_filename', "inquirerbasic.csv")
    )
    corpus_dirname: str = Field(
        default_factory=lambda: _get_config().get('corpus_dirname', "txt_sentoken")
    )
    output_stem: str = Field(
        default_factory=lambda: _get_config().get('output_stem', "movie-reviews")
    )

    @property
    def data_dir(self) -> Path:
        return self.project_root / "data"

    @property
    def lexicon_dir(self) -> Path:
        """Directory holding the General Inquirer lexicon"""
        return self.data_dir / "general_inquirer_lexicon"

    @property
    def lexicon_csv(self) -> Path:
        """Path to the semicolon-delimited lexicon file."""
        return self.lexicon_dir / self.lexicon_filename

    @property
    def corpus_dir(self) -> Path:
        """Root of the review corpus (contains pos/ and neg/)"""
        return self.data_dir / self.corpus_dirname

    @property
    def features_csv(self) -> Path:
        return self.data_dir / f"{self.output_stem}.csv"

    @property
    def features_arff(self) -> Path:
        return self.data_dir / f"{self.output_stem}.arff"

    @property
    def logs_dir(self) -> Path:
        return self.project_root / "logs"

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        directories = [
            self.data_dir,
            self.lexicon_dir,
            self.logs_dir,
        ]
        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)
