"""Configuration loading for config-driven schemas."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError


def load_config(source: Union[str, Path, dict]) -> Dict[str, Any]:
    """Load a configuration mapping from a dict or a YAML/JSON file.

    Args:
        source: File path or dictionary

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            format, or does not contain a mapping
    """
    if isinstance(source, dict):
        return source
    if not isinstance(source, (str, Path)):
        raise ConfigurationError(f"Invalid source type: {type(source)}")

    path = Path(source).resolve()
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            context={"path": str(path)},
        )

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}",
                context={"path": str(path)},
            )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return data
