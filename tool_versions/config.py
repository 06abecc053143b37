"""
Configuration loading for parse-asdf.

Settings come from (highest priority first) an explicit config file, the
action inputs exposed by the runner as INPUT_* environment variables, a
project .parse-asdf.yml and the built-in defaults.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from typing import Any

import yaml

from .common import vlog
from .manifest import DEFAULT_MANIFEST
from .workflow import DEFAULT_VARIABLE_SUFFIX


# Project configuration files (in priority order)
CONFIG_LOCATIONS = [
    ".parse-asdf.yml",
    ".parse-asdf.yaml",
]

# Action input name -> Config field
INPUT_FIELDS = {
    "FILE": "manifest_file",
    "SUFFIX": "variable_suffix",
    "OUTPUT": "output_name",
    "EXPORT": "export",
    "GROUP": "group_name",
}

_SUFFIX_RE = re.compile(r"^[A-Za-z0-9_]*$")
_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off"}


def parse_bool(value: Any) -> bool:
    """Parse a boolean from YAML or an action input string."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _get_str(data: dict[str, Any], key: str, default: str | None, nullable: bool = False) -> str | None:
    """
    Read a string setting.

    Raises:
        ValueError: If the value is null (unless nullable) or not a string
    """
    if key not in data:
        return default
    value = data[key]
    if value is None and nullable:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Invalid {key}: {value!r}. Expected a string")
    return value


@dataclass(frozen=True)
class Config:
    """
    Runtime configuration.

    Attributes:
        manifest_file: Manifest filename, resolved against the working directory
        variable_suffix: Suffix appended to upper-cased tool names on export
        output_name: Step output receiving the JSON-encoded tool map
        export: Whether to export environment variables at all
        group_name: Log group title (defaults to the manifest filename)
        source: Path to the configuration file that was loaded
    """
    manifest_file: str = DEFAULT_MANIFEST
    variable_suffix: str = DEFAULT_VARIABLE_SUFFIX
    output_name: str = "tools"
    export: bool = True
    group_name: str | None = None
    source: str = ""

    def __post_init__(self):
        """Validate config after initialization."""
        if not self.manifest_file:
            raise ValueError("manifest_file must not be empty")

        if not _SUFFIX_RE.match(self.variable_suffix):
            raise ValueError(
                f"Invalid variable_suffix: {self.variable_suffix!r}. "
                "Only letters, digits and underscores are allowed"
            )

        if not self.output_name:
            raise ValueError("output_name must not be empty")

    @property
    def group_title(self) -> str:
        return self.group_name or os.path.basename(self.manifest_file)

    @staticmethod
    def from_dict(data: dict[str, Any], source: str = "") -> Config:
        """Create Config from dictionary."""
        return Config(
            manifest_file=_get_str(data, "file", DEFAULT_MANIFEST),
            variable_suffix=_get_str(data, "suffix", DEFAULT_VARIABLE_SUFFIX),
            output_name=_get_str(data, "output", "tools"),
            export=parse_bool(data.get("export", True)),
            group_name=_get_str(data, "group", None, nullable=True),
            source=source,
        )

    def with_inputs(self, environ: dict[str, str] | None = None) -> Config:
        """
        Apply non-empty INPUT_* action inputs on top of this config.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            New Config object
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}
        for input_name, field_name in INPUT_FIELDS.items():
            value = env.get(f"INPUT_{input_name}", "").strip()
            if not value:
                continue
            overrides[field_name] = parse_bool(value) if field_name == "export" else value

        if not overrides:
            return self
        return replace(self, **overrides)


def load_config_file(file_path: str, verbose: bool = False) -> Config | None:
    """
    Load configuration from a single YAML file.

    Returns:
        Config object, or None if the file is missing or invalid
    """
    if not os.path.exists(file_path):
        return None

    vlog(f"Loading config from: {file_path}", verbose)

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        vlog(f"Invalid config file {file_path}: {e}", verbose)
        return None

    if data is None:
        data = {}
    if not isinstance(data, dict):
        vlog(f"Invalid config file {file_path}: expected a mapping", verbose)
        return None

    try:
        return Config.from_dict(data, source=file_path)
    except (ValueError, TypeError) as e:
        vlog(f"Config validation failed for {file_path}: {e}", verbose)
        return None


def load_config(
    custom_path: str | None = None,
    verbose: bool = False,
    environ: dict[str, str] | None = None,
) -> Config:
    """
    Load configuration from all sources.

    Precedence (highest to lowest):
    1. Custom path (if provided)
    2. Action inputs (INPUT_FILE, INPUT_SUFFIX, INPUT_OUTPUT, INPUT_EXPORT, INPUT_GROUP)
    3. Project .parse-asdf.yml
    4. Defaults

    Raises:
        ValueError: If custom_path is provided but cannot be loaded, or an
            action input is invalid
    """
    if custom_path:
        config = load_config_file(custom_path, verbose)
        if config is None:
            raise ValueError(f"Could not load config from specified path: {custom_path}")
        vlog(f"Using custom config: {custom_path}", verbose)
        return config

    base = Config()
    for location in CONFIG_LOCATIONS:
        config = load_config_file(location, verbose)
        if config is not None:
            vlog(f"Found config at: {location}", verbose)
            base = config
            break

    return base.with_inputs(environ)
