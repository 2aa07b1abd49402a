#!/usr/bin/env python3
"""
Match a name against a list of candidates.

Usage:
    python scripts/fuzzy_match.py -s "Acme & Co Ltd" -l "Acme Corp|Widgets Inc" -c 70 -m ratio
    python scripts/fuzzy_match.py -s "Intl Mfg" -l "International Manufacturing|Intl Foods" -c 80 -m tokensetratio
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matching.cli import run


if __name__ == "__main__":
    run()
