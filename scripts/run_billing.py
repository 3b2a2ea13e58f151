#!/usr/bin/env python
"""
Print bills for the sample requests.

Usage:
    python scripts/run_billing.py [requests.csv]
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from plan_billing.engine.billing_engine import main


if __name__ == "__main__":
    main()
