#!/usr/bin/env python3
"""Start the TSC Baseline API from a source checkout.

  python scripts/start_api.py --port 8080
  python scripts/start_api.py --reload
"""

import sys

from tscbaseline.api.server import main

if __name__ == "__main__":
    sys.exit(main())
