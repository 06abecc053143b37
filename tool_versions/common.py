"""
Common utilities shared across tool_versions modules.
"""

from __future__ import annotations

import os
import sys


def is_github_actions() -> bool:
    """Check if running as a GitHub Actions step."""
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


def vlog(msg: str, verbose: bool = False) -> None:
    """
    Log verbose message using structured logging.

    Args:
        msg: Message to log
        verbose: Whether verbose mode is enabled
    """
    if verbose or os.environ.get("PARSE_ASDF_DEBUG", "0") == "1":
        try:
            from .logging_config import get_logger
            get_logger().info(msg)
        except Exception:
            # Fallback to stderr if logging fails
            print(f"[parse-asdf] {msg}", file=sys.stderr)
