"""Configuration loading and validation for bibroster.

Reads an optional YAML config file and produces a validated
BibRosterConfig object. Every field has a default, so running without
a config file reproduces the stock affiliation labels.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from bibroster.models import EXTERNAL_AFFILIATION, INSTITUTE_AFFILIATION

logger = logging.getLogger(__name__)


class InstituteConfig(BaseModel):
    """Institute metadata."""

    name: str = ""
    affiliation: str = INSTITUTE_AFFILIATION


class BibRosterConfig(BaseModel):
    """Top-level bibroster configuration."""

    institute: InstituteConfig = Field(default_factory=InstituteConfig)
    external_label: str = EXTERNAL_AFFILIATION
    encoding: str = "utf-8"


def load_config(config_path: str | Path) -> BibRosterConfig:
    """Load and validate a bibroster YAML configuration file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Validated BibRosterConfig instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the YAML is malformed.
        pydantic.ValidationError: If the config fails validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = BibRosterConfig.model_validate(raw)
    logger.info(
        "Loaded config for institute %r from %s",
        config.institute.name or config.institute.affiliation,
        path,
    )
    return config
