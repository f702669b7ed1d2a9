"""Configuration for the transposer command line."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from chord_transposer.harmony.chromatic import (
    DEFAULT_SCALE,
    DEFAULT_SEPARATOR,
    ChromaticTable,
)

logger = logging.getLogger(__name__)


@dataclass
class TransposerConfig:
    """Configuration loaded at startup.

    Attributes:
        chromatic_scale: Raw chromatic table entries, starting at C.
        separator: Separator between sharp and flat spellings in an entry.
        default_interval: Interval used when none is given on the command line.
    """

    chromatic_scale: list[str] = field(default_factory=lambda: list(DEFAULT_SCALE))
    separator: str = DEFAULT_SEPARATOR
    default_interval: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransposerConfig:
        """Create a config from a dictionary.

        Raises:
            ValueError: If the dictionary has unknown keys or bad values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        config = cls(**data)

        if not isinstance(config.chromatic_scale, list) or not all(
            isinstance(entry, str) for entry in config.chromatic_scale
        ):
            raise ValueError("chromatic_scale must be a list of strings")
        if not isinstance(config.separator, str):
            raise ValueError("separator must be a string")
        if isinstance(config.default_interval, bool) or not isinstance(config.default_interval, int):
            raise ValueError("default_interval must be an integer")

        return config

    def build_table(self) -> ChromaticTable:
        """Build the immutable chromatic table.

        Raises:
            ChromaticTableError: If the configured scale is invalid.
        """
        return ChromaticTable.from_entries(self.chromatic_scale, self.separator)


def load_config(path: Path | None) -> TransposerConfig:
    """Load configuration from a JSON file.

    Args:
        path: Path to the config file, or None for defaults.

    Returns:
        The loaded configuration.

    Raises:
        ValueError: If the file is not a valid config.
    """
    if path is None:
        return TransposerConfig()

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    config = TransposerConfig.from_dict(data)
    logger.debug(f"Loaded config from {path}")
    return config
