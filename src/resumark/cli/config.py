#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file loading for the resumark CLI.

A config file holds one section per concern::

    [typography.links]
    underline = true

    [html]
    escape_html = true

    [latex]
    escape_link_urls = false

    [markdown]
    link_target = "_blank"

    [tree]
    strict_mode = true

JSON, TOML and YAML files are accepted; the format is chosen by extension.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from resumark.context import GenerationContext
from resumark.exceptions import ValidationError
from resumark.options import (
    BaseParserOptions,
    BaseRendererOptions,
    HtmlRendererOptions,
    LatexRendererOptions,
    MarkdownParserOptions,
    TreeParserOptions,
)

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ("typography", "html", "latex", "markdown", "tree")


@dataclass
class Settings:
    """Options and context assembled from a config file and CLI flags."""

    context: GenerationContext = field(default_factory=GenerationContext)
    parser_options: Dict[str, BaseParserOptions] = field(
        default_factory=lambda: {"markdown": MarkdownParserOptions(), "tree": TreeParserOptions()}
    )
    renderer_options: Dict[str, BaseRendererOptions] = field(
        default_factory=lambda: {"html": HtmlRendererOptions(), "latex": LatexRendererOptions()}
    )


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML or YAML file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary (empty for an empty YAML file)

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValidationError
        If the file cannot be parsed or its root is not a table/object

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file does not exist: {config_path}")

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ValidationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml",
                parameter_name="config",
                parameter_value=str(config_path),
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValidationError(
            f"Invalid config file {config_path}: {e}", parameter_name="config", original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ValidationError(
            f"Config file must contain a table at root level, got {type(config).__name__}",
            parameter_name="config",
        )

    logger.debug("Loaded config from %s", config_path)
    return config


def _section(config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = config.get(name) or {}
    if not isinstance(value, Mapping):
        raise ValidationError(f"Config section '{name}' must be a table", parameter_name=name, parameter_value=value)
    return value


def build_settings(config: Mapping[str, Any] | None = None, link_underline: bool = False) -> Settings:
    """Turn a loaded config into parser/renderer options and a generation context.

    Parameters
    ----------
    config : Mapping, optional
        Loaded configuration
    link_underline : bool, default False
        ``--link-underline`` flag; overrides ``typography.links.underline``

    Returns
    -------
    Settings
        Assembled settings

    """
    config = config or {}
    for key in config:
        if key not in CONFIG_SECTIONS:
            logger.warning("Ignoring unknown config section '%s'", key)

    try:
        context = GenerationContext.from_dict({"typography": _section(config, "typography")})
        if link_underline:
            context = GenerationContext.from_dict({"typography": {"links": {"underline": True}}})

        return Settings(
            context=context,
            parser_options={
                "markdown": MarkdownParserOptions.from_mapping(_section(config, "markdown")),
                "tree": TreeParserOptions.from_mapping(_section(config, "tree")),
            },
            renderer_options={
                "html": HtmlRendererOptions.from_mapping(_section(config, "html")),
                "latex": LatexRendererOptions.from_mapping(_section(config, "latex")),
            },
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid option value in config: {e}", original_error=e) from e
