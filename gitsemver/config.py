"""Configuration file loader for gitsemver.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``gitsemver.toml``: settings under ``[gitsemver]`` table
- ``pyproject.toml``: settings under ``[tool.gitsemver]`` table

Discovery order:

1. Explicit path from ``--config`` or ``GITSEMVER_CONFIG``
2. ``gitsemver.toml`` in the search directory
3. ``pyproject.toml`` with ``[tool.gitsemver]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``gitsemver.toml``)::

    [gitsemver]
    tag_prefix = "release-"
    dev_label = "dev"
    hash_length = 10
    reference_tag = 1
"""

from __future__ import annotations

import re
import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from gitsemver.exceptions import ConfigError
from gitsemver.utils.logger import get_logger
from gitsemver.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DEV_LABEL,
    DEFAULT_HASH_LENGTH,
    DEFAULT_REFERENCE_TAG,
    DEFAULT_TAG_PREFIX,
    HASH_LENGTH_RANGE,
    PYPROJECT_FILE_NAME,
)

logger = get_logger("config")

# A dev label must be a single non-numeric pre-release identifier
_DEV_LABEL_RE = re.compile(r"^[0-9A-Za-z-]*[A-Za-z-][0-9A-Za-z-]*$")


@dataclass
class GitSemverConfig:
    """Parsed and validated gitsemver configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        tag_prefix: Prefix stripped from tags before parsing (``v1.2.3``).
        dev_label: Pre-release identifier placed before the commit count.
        hash_length: Length of the abbreviated commit hash.
        reference_tag: Which tag ``validate`` compares against (1 = latest).
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    tag_prefix: str = DEFAULT_TAG_PREFIX
    dev_label: str = DEFAULT_DEV_LABEL
    hash_length: int = DEFAULT_HASH_LENGTH
    reference_tag: int = DEFAULT_REFERENCE_TAG

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "tag_prefix": self.tag_prefix,
            "dev_label": self.dev_label,
            "hash_length": self.hash_length,
            "reference_tag": self.reference_tag,
        }


def discover_config_file(
    explicit_path: Optional[Path] = None,
    *,
    search_dir: Optional[Path] = None,
) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.
        search_dir: Directory searched for implicit config files.
            Defaults to the current directory.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    base = search_dir if search_dir is not None else Path.cwd()

    dedicated = base / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = base / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_gitsemver_section(pyproject):
        logger.debug("Found [tool.gitsemver] in pyproject.toml: %s", pyproject)
        return pyproject

    logger.debug("No configuration file found in %s", base)
    return None


def _pyproject_has_gitsemver_section(path: Path) -> bool:
    """Return True if ``path`` contains a ``[tool.gitsemver]`` table.

    An unreadable or invalid pyproject.toml is not ours to report, so it
    counts as "no section".
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and "gitsemver" in tool


def load_config(
    config_path: Optional[Path] = None,
    *,
    search_dir: Optional[Path] = None,
) -> GitSemverConfig:
    """Load and validate gitsemver configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).
        search_dir: Directory used for auto-discovery.

    Returns:
        Validated :class:`GitSemverConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path, search_dir=search_dir)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return GitSemverConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        tool = raw.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(
                "[tool] in pyproject.toml must be a table",
                config_path=str(resolved),
            )
        section = tool.get("gitsemver", {})
    else:
        section = raw.get("gitsemver", {})

    if not section:
        logger.debug("Config file found but no gitsemver section, using defaults")
        return GitSemverConfig(source_path=resolved)

    if not isinstance(section, dict):
        raise ConfigError(
            "gitsemver configuration must be a table",
            config_path=str(resolved),
        )

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


_TYPE_NAMES = {str: "a string", int: "an integer"}


def _require_type(section: Dict[str, Any], key: str, expected: type, config_path: str) -> Any:
    value = section[key]
    # bool is a subclass of int but never a valid value here
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConfigError(
            f"{key} must be {_TYPE_NAMES[expected]}, got {type(value).__name__}",
            config_path=config_path,
            option=key,
        )
    return value


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> GitSemverConfig:
    """Parse and validate the ``[gitsemver]`` or ``[tool.gitsemver]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or out-of-range values.
    """
    config = GitSemverConfig()

    known_top = {"tag_prefix", "dev_label", "hash_length", "reference_tag"}

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "tag_prefix" in section:
        config.tag_prefix = _require_type(section, "tag_prefix", str, config_path)

    if "dev_label" in section:
        label = _require_type(section, "dev_label", str, config_path)
        if not _DEV_LABEL_RE.match(label):
            raise ConfigError(
                f"dev_label must be a non-numeric semver identifier, got {label!r}",
                config_path=config_path,
                option="dev_label",
            )
        config.dev_label = label

    if "hash_length" in section:
        length = _require_type(section, "hash_length", int, config_path)
        low, high = HASH_LENGTH_RANGE
        if not low <= length <= high:
            raise ConfigError(
                f"hash_length must be between {low} and {high}, got {length}",
                config_path=config_path,
                option="hash_length",
            )
        config.hash_length = length

    if "reference_tag" in section:
        index = _require_type(section, "reference_tag", int, config_path)
        if index < 1:
            raise ConfigError(
                f"reference_tag must be >= 1, got {index}",
                config_path=config_path,
                option="reference_tag",
            )
        config.reference_tag = index

    return config
