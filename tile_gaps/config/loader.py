"""
Configuration loader for tile gaps.

Loads ``config.toml``; gap and offset keys may sit at top level or under
a ``[gaps]`` table. ``TILE_GAPS_*`` environment variables override file
values. Invalid values fall back to their defaults one field at a time,
so the geometry engine only ever sees well-typed, non-negative integers.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import ConfigLoadError, ConfigValueError
from ..models import GapConfig, TileGapsConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tile-gaps" / "config.toml"
ENV_PREFIX = "TILE_GAPS_"

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_with_defaults(
    model_cls: Type[ModelT],
    data: Dict[str, Any],
    sources: Optional[Dict[str, str]] = None,
) -> Tuple[ModelT, List[ConfigValueError]]:
    """
    Build a model, dropping invalid fields so they take their defaults.

    Args:
        model_cls: Pydantic model class
        data: Raw field values
        sources: Where each field came from (file path or variable name)

    Returns:
        Tuple of (model instance, one ConfigValueError per rejected field)
    """
    try:
        return model_cls(**data), []
    except ValidationError as e:
        sources = sources or {}
        issues: List[ConfigValueError] = []
        for err in e.errors():
            if not err["loc"]:
                continue
            field_name = str(err["loc"][0])
            if any(issue.field_name == field_name for issue in issues):
                continue
            issue = ConfigValueError(
                field_name, data.get(field_name), err["msg"], sources.get(field_name, "configuration")
            )
            logger.warning(f"{issue.message}, using default")
            issues.append(issue)

        invalid = {issue.field_name for issue in issues}
        model = model_cls(**{k: v for k, v in data.items() if k not in invalid})
        return model, issues


class ConfigLoader:
    """Loads tile gaps configuration from TOML and the environment."""

    def __init__(self, config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to config.toml (defaults to ~/.config/tile-gaps/config.toml)
            environ: Environment mapping (defaults to os.environ)
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.environ = os.environ if environ is None else environ
        self.issues: List[ConfigValueError] = []

    def read_file(self) -> Dict[str, Any]:
        """
        Read raw values from the configuration file.

        Returns:
            Flat dictionary of configuration values ({} if the file doesn't exist)

        Raises:
            ConfigLoadError: If the file can't be read or TOML syntax is invalid
        """
        if not self.config_path.exists():
            logger.debug(f"No configuration file at {self.config_path}, using defaults")
            return {}

        try:
            with open(self.config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigLoadError(str(self.config_path), str(e))

        flat = {k: v for k, v in data.items() if k != "gaps"}
        gaps_table = data.get("gaps", {})
        if isinstance(gaps_table, dict):
            flat.update(gaps_table)
        return flat

    def read_environment(self) -> Dict[str, str]:
        """Collect TILE_GAPS_* overrides for known fields."""
        fields = list(GapConfig.model_fields) + ["include_maximized", "debug_mode"]
        overrides = {}
        for name in fields:
            value = self.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                overrides[name] = value
        return overrides

    def load(self) -> TileGapsConfig:
        """
        Load the effective configuration.

        Rejected fields of the last load are kept in ``self.issues``.

        Returns:
            TileGapsConfig with file values, environment overrides and defaults

        Raises:
            ConfigLoadError: If the configuration file is unreadable
        """
        data = self.read_file()
        sources = {name: str(self.config_path) for name in data}
        overrides = self.read_environment()
        data.update(overrides)
        sources.update({name: f"{ENV_PREFIX}{name.upper()}" for name in overrides})

        gap_fields = set(GapConfig.model_fields)
        gaps, gap_issues = build_with_defaults(
            GapConfig, {k: v for k, v in data.items() if k in gap_fields}, sources
        )
        options, option_issues = build_with_defaults(
            TileGapsConfig,
            {k: v for k, v in data.items() if k in ("include_maximized", "debug_mode")},
            sources,
        )
        self.issues = gap_issues + option_issues

        config = options.model_copy(update={"gaps": gaps})
        logger.debug(f"Loaded configuration: {config.model_dump()}")
        return config
