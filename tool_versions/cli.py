"""
Command-line entry point.

Reads the manifest from the working directory, exports every tool version as
an environment variable and publishes the whole map as a step output.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .config import Config, load_config
from .logging_config import get_logger, setup_logging
from .manifest import ManifestError, get_manifest_path, parse_tool_versions, tools_to_json
from .workflow import WorkflowError, env_var_name, export_variable, group, set_failed, set_output


def run(config: Config, cwd: Path | None = None) -> int:
    """
    Parse the manifest and relay the result to the CI host.

    Returns:
        Process exit code
    """
    logger = get_logger()
    manifest_path = get_manifest_path(config.manifest_file, cwd)
    logger.debug(str(manifest_path))

    try:
        tools = parse_tool_versions(manifest_path)
    except ManifestError as e:
        return set_failed(e.message)

    if config.export:
        logger.warning("All found versions are exported to env variables")

    # Tool names are exported unvalidated; os.environ rejects names such as "a=b"
    try:
        with group(config.group_title):
            for name, version in tools.items():
                logger.info(f"Gathered '{name}' version {version}")
                if config.export:
                    export_variable(env_var_name(name, config.variable_suffix), version)

        set_output(config.output_name, tools_to_json(tools))
    except (WorkflowError, ValueError, OSError) as e:
        return set_failed(str(e))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for parse-asdf."""
    parser = argparse.ArgumentParser(
        prog="parse-asdf",
        description="Export .tool-versions entries as environment variables and a step output",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and errors",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("PARSE_ASDF_LOG_FILE") or None,
        help="Also write a debug log to this file",
    )

    args = parser.parse_args(argv)

    setup_logging(
        level=os.environ.get("PARSE_ASDF_LOG_LEVEL", "INFO"),
        log_file=args.log_file,
        verbose=args.verbose,
        quiet=args.quiet,
    )

    try:
        config = load_config(args.config, verbose=args.verbose)
    except ValueError as e:
        return set_failed(str(e))

    return run(config)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
