"""Configuration models."""

from dataclasses import dataclass

from ..simple.constants import REQUIRED_EXTENSIONS, TRASH_FOLDER


@dataclass(frozen=True)
class Config:
    """Main configuration container."""
    required_extensions: tuple[str, ...] = REQUIRED_EXTENSIONS
    trash_folder: str = TRASH_FOLDER
    output_format: str = "json"  # "json" or "table"
    log_level: str = "WARNING"
