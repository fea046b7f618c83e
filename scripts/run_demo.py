#!/usr/bin/env python3
"""
Design Patterns Demo Runner

Usage:
    python scripts/run_demo.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from design_patterns.cli.demo import main


if __name__ == "__main__":
    sys.exit(main())
