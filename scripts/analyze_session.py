#!/usr/bin/env python3
"""Run threat analysis for one session from a checkout.

Usage:
    python scripts/analyze_session.py SESSION_ID --input transcript.json
    python scripts/analyze_session.py SESSION_ID --translate --json

Same as the ``threatscan-analyze`` console script.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from threatscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
