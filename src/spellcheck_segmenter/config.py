from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class SegmenterConfig:
    """Configuration options for word segmentation."""

    language: str = "en-US"
    extra_mid_letters: str = ""
    skip_numeric: bool = True
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> SegmenterConfig:
    """Build a SegmenterConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return SegmenterConfig()
    allowed = {field.name for field in fields(SegmenterConfig)}
    return SegmenterConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> SegmenterConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SegmenterConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return SegmenterConfig()
    return config_from_yaml(path)
