"""Configuration loader."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from ..simple.constants import REQUIRED_EXTENSIONS, TRASH_FOLDER
from .models import Config

OUTPUT_FORMATS = ("json", "table")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _required_extensions(value, config_path: str) -> tuple[str, ...]:
    if value is None:
        return REQUIRED_EXTENSIONS
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValueError(f"required_extensions in {config_path} must be a list of names: {value!r}")


def load_config(config_path: str = "config.yaml") -> Config:
    """Load configuration from YAML file and environment."""
    load_dotenv()

    log_level = os.getenv("SIEVE_SIMPLE_LOG_LEVEL", "WARNING").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level in SIEVE_SIMPLE_LOG_LEVEL: {log_level}")

    yaml_config = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_config = yaml.safe_load(f) or {}

    output_format = yaml_config.get("output", "json")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format in {config_path}: {output_format}")

    return Config(
        required_extensions=_required_extensions(yaml_config.get("required_extensions"), config_path),
        trash_folder=yaml_config.get("trash_folder", TRASH_FOLDER),
        output_format=output_format,
        log_level=log_level,
    )
