"""
Runtime settings.

Settings come from three layers, later ones winning: the defaults on
:class:`RankingSettings`, an optional YAML file, and ``RESUMERANK_*``
environment variables (a local ``.env`` file is loaded first).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

import yaml  # type: ignore
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "RESUMERANK_"


@dataclass
class RankingSettings:
    keyword_count: int = 10
    accepted_content_types: List[str] = field(default_factory=lambda: ["application/pdf"])
    accepted_extensions: List[str] = field(default_factory=lambda: [".pdf"])
    extra_stopwords: List[str] = field(default_factory=list)
    export_filename: str = "resume-rankings.csv"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not isinstance(self.keyword_count, int) or isinstance(self.keyword_count, bool):
            raise ValueError(f"keyword_count must be an integer, got {self.keyword_count!r}")
        if self.keyword_count < 0:
            raise ValueError("keyword_count must not be negative")
        for name in ("accepted_content_types", "accepted_extensions", "extra_stopwords"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{name} must be a list of strings")
        self.log_level = str(self.log_level).upper()


def _load_config(config_path: str) -> Dict[str, object]:
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return data


def _env_overrides() -> Dict[str, object]:
    overrides: Dict[str, object] = {}
    keyword_count = os.getenv(ENV_PREFIX + "KEYWORD_COUNT")
    if keyword_count:
        try:
            overrides["keyword_count"] = int(keyword_count)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}KEYWORD_COUNT must be an integer, got {keyword_count!r}"
            ) from exc
    log_level = os.getenv(ENV_PREFIX + "LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level
    return overrides


def load_settings(config_path: Optional[str] = None) -> RankingSettings:
    """Build settings from defaults, a YAML file and the environment.

    Args:
        config_path: Optional path to a YAML file whose top‑level keys
            match :class:`RankingSettings` fields.  Unknown keys are
            ignored with a warning.

    Returns:
        A validated :class:`RankingSettings`.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ValueError: If a value has the wrong type.
    """
    load_dotenv()
    known = {f.name for f in fields(RankingSettings)}
    values: Dict[str, object] = {}
    if config_path:
        for key, value in _load_config(config_path).items():
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, config_path)
                continue
            values[key] = value
    values.update(_env_overrides())
    settings = RankingSettings(**values)
    logger.debug("Loaded settings: %s", settings)
    return settings
