"""Configuration loading."""

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import ValidationError

from xmlcomp.errors import ConfigurationError

from .settings import Settings

logger = structlog.get_logger()


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    """Read a YAML config file into a mapping."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_file}: {e}",
            config_key="config_file",
            previous_error=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_file}: {e}",
            config_key="config_file",
            previous_error=e,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_file} must contain a mapping",
            config_key="config_file",
        )
    return data


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """Build settings from an optional YAML file, the environment and overrides.

    Overrides whose value is ``None`` are ignored so unset command-line
    flags do not mask file or environment values.
    """
    values: Dict[str, Any] = {}
    if config_file is not None:
        values.update(_read_config_file(Path(config_file)))
        logger.debug("Loaded config file", file=str(config_file), keys=sorted(values))

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = Settings(**values)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        key = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            config_key=key,
            previous_error=e,
        ) from e

    return settings
