"""
YAML defaults for the settings classes.

Each settings section reads its defaults from one top-level key of a file in
configs/. Files are parsed once and cached; environment variables still win
over whatever the file says because pydantic-settings applies them after the
default factories run.

    negation = load_yaml_section("config.yaml", "negation")
    negation.get("prefix", "NOT_")
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"


@lru_cache(maxsize=8)
def _parse_config_file(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}

    with open(path, 'r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return data


def load_yaml_section(config_file: str, section: Optional[str] = None) -> Dict[str, Any]:
    """
    Return one section (or the whole file) of a YAML file in configs/.

    A missing file or section yields an empty dict so every field falls back
    to its hard-coded default. The returned dict is a copy; callers may
    modify it.
    """
    data = _parse_config_file(CONFIGS_DIR / config_file)
    if section is None:
        return dict(data)

    value = data.get(section) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Section '{section}' of {config_file} must be a mapping")
    return dict(value)


def clear_config_cache() -> None:
    """Forget parsed files so the next settings object re-reads configs/."""
    _parse_config_file.cache_clear()
