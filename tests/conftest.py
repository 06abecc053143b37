"""
Shared fixtures.
"""

import os
from unittest.mock import patch

import pytest

from tool_versions import logging_config


HOST_VARIABLES = [
    "GITHUB_ACTIONS",
    "GITHUB_ENV",
    "GITHUB_OUTPUT",
    "PARSE_ASDF_DEBUG",
    "PARSE_ASDF_LOG_FILE",
    "PARSE_ASDF_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_host_environment(monkeypatch):
    """Run every test outside of any CI runner context."""
    for var in HOST_VARIABLES:
        monkeypatch.delenv(var, raising=False)
    for var in list(os.environ):
        if var.startswith("INPUT_") or var.endswith("_VERSION"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(logging_config, "_logger", None)
    # Exported variables are written straight into os.environ
    with patch.dict(os.environ):
        yield


@pytest.fixture
def manifest(tmp_path):
    """Write a manifest with raw bytes and return its path."""
    def _write(content, name=".tool-versions"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path
    return _write
