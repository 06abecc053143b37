"""
parse-asdf - expose .tool-versions entries to CI pipelines.

Core Modules:
- Manifest: parsing of asdf-style tool-version manifests
- Workflow: GitHub Actions environment export, outputs, groups and failures
- Config: YAML file and action-input configuration
"""

__version__ = "1.0.0"

VERSION = __version__

# Manifest parsing
from .manifest import (
    DEFAULT_MANIFEST,
    ManifestError,
    ToolVersionEntry,
    ToolVersionMap,
    get_manifest_path,
    iter_entries,
    parse_line,
    parse_tool_versions,
    tools_to_json,
)

# Host integration
from .workflow import (
    WorkflowError,
    end_group,
    env_var_name,
    export_variable,
    group,
    set_failed,
    set_output,
    start_group,
)

# Configuration
from .config import Config, load_config, load_config_file

# Logging configuration
from .logging_config import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Version
    "__version__",
    "VERSION",
    # Manifest
    "DEFAULT_MANIFEST",
    "ManifestError",
    "ToolVersionEntry",
    "ToolVersionMap",
    "get_manifest_path",
    "iter_entries",
    "parse_line",
    "parse_tool_versions",
    "tools_to_json",
    # Host integration
    "WorkflowError",
    "end_group",
    "env_var_name",
    "export_variable",
    "group",
    "set_failed",
    "set_output",
    "start_group",
    # Configuration
    "Config",
    "load_config",
    "load_config_file",
    # Logging
    "setup_logging",
    "get_logger",
]
