#!/usr/bin/env python3
"""
parse-asdf - export .tool-versions entries to the CI pipeline.

Usage:
    parse_asdf.py              # Read ./.tool-versions, export <TOOL>_VERSION variables
    parse_asdf.py --verbose    # Same, with debug logging
"""

import os
import sys

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tool_versions.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
