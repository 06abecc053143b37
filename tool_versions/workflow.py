"""
GitHub Actions host integration.

Implements the subset of the runner's workflow command protocol that the
action needs: exporting environment variables, setting step outputs, log
groups and failure reporting. Values go through the runner's file commands
(GITHUB_ENV, GITHUB_OUTPUT) when available and fall back to stdout commands
otherwise.
"""

from __future__ import annotations

import json
import os
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, TextIO

from .logging_config import get_logger


DEFAULT_VARIABLE_SUFFIX = "_VERSION"


class WorkflowError(RuntimeError):
    """Raised when a workflow command cannot be issued."""


def to_command_value(value: Any) -> str:
    """Convert a value to the string form used in workflow commands."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def escape_data(value: Any) -> str:
    return (
        to_command_value(value)
        .replace("%", "%25")
        .replace("\r", "%0D")
        .replace("\n", "%0A")
    )


def escape_property(value: Any) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, properties: dict[str, Any] | None = None, message: Any = "") -> str:
    """
    Build a ``::command key=value,...::message`` line.

    Properties with a None value are omitted.
    """
    line = f"::{command}"
    props = [
        f"{key}={escape_property(val)}"
        for key, val in (properties or {}).items()
        if val is not None
    ]
    if props:
        line += " " + ",".join(props)
    return f"{line}::{escape_data(message)}"


def issue_command(
    command: str,
    properties: dict[str, Any] | None = None,
    message: Any = "",
    stream: TextIO | None = None,
) -> None:
    """Write a workflow command to stdout (or the given stream)."""
    out = stream if stream is not None else sys.stdout
    out.write(format_command(command, properties, message) + "\n")
    out.flush()


def issue_file_command(kind: str, message: Any) -> None:
    """
    Append a message to the runner file named by ``GITHUB_<kind>``.

    Raises:
        WorkflowError: If the variable is unset or the file does not exist
    """
    file_path = os.environ.get(f"GITHUB_{kind}")
    if not file_path:
        raise WorkflowError(f"Unable to find environment variable for file command {kind}")
    if not os.path.exists(file_path):
        raise WorkflowError(f"Missing file at path: {file_path}")

    with open(file_path, "a", encoding="utf-8", newline="\n") as f:
        f.write(to_command_value(message) + "\n")


def prepare_key_value_message(key: str, value: Any) -> str:
    """
    Format a key/value pair in the runner's heredoc syntax.

    Raises:
        WorkflowError: If the random delimiter appears in the key or value
    """
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    converted = to_command_value(value)

    if delimiter in key:
        raise WorkflowError(f'Unexpected input: name should not contain the delimiter "{delimiter}"')
    if delimiter in converted:
        raise WorkflowError(f'Unexpected input: value should not contain the delimiter "{delimiter}"')

    return f"{key}<<{delimiter}\n{converted}\n{delimiter}"


def export_variable(name: str, value: Any) -> None:
    """
    Export an environment variable to this process and to later steps.
    """
    converted = to_command_value(value)
    os.environ[name] = converted

    if os.environ.get("GITHUB_ENV"):
        issue_file_command("ENV", prepare_key_value_message(name, converted))
    else:
        issue_command("set-env", {"name": name}, converted)


def set_output(name: str, value: Any) -> None:
    """Set a step output."""
    if os.environ.get("GITHUB_OUTPUT"):
        issue_file_command("OUTPUT", prepare_key_value_message(name, value))
        return

    sys.stdout.write("\n")
    issue_command("set-output", {"name": name}, to_command_value(value))


def start_group(name: str) -> None:
    issue_command("group", None, name)


def end_group() -> None:
    issue_command("endgroup")


@contextmanager
def group(name: str) -> Iterator[None]:
    """Wrap log output in a collapsible group."""
    start_group(name)
    try:
        yield
    finally:
        end_group()


def set_failed(message: Any) -> int:
    """
    Report the step as failed.

    Returns:
        Exit code for the process (always 1)
    """
    get_logger().error(to_command_value(message))
    return 1


def env_var_name(tool: str, suffix: str = DEFAULT_VARIABLE_SUFFIX) -> str:
    """Environment variable name for a tool, e.g. ``nodejs`` -> ``NODEJS_VERSION``."""
    return f"{tool.upper()}{suffix}"
