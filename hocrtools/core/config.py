"""Configuration for the line extraction tool."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class ExtractionConfig:
    """Options for extracting line image/text pairs from hOCR files."""
    output_dir: str = "."
    use_base_path: bool = False
    image_suffix: str = ".png"
    skip_empty_text: bool = True

    def update(self, values: Dict[str, Any]) -> None:
        """Override options from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key in known and value is not None:
                setattr(self, key, value)


def load_config(
    path: Optional[Union[str, Path]] = None,
    config: Optional[ExtractionConfig] = None
) -> ExtractionConfig:
    """
    Load extraction options from a YAML file.

    Values in the file override those of ``config`` (or the defaults).
    Missing keys are left alone, and no path gives ``config`` unchanged.
    """
    if config is None:
        config = ExtractionConfig()
    if path is None:
        return config

    with open(path, "r") as f:
        values = yaml.safe_load(f) or {}

    if not isinstance(values, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(values).__name__}")

    config.update(values)
    return config
