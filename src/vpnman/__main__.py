"""Allow running as ``python -m vpnman``."""

import sys

from vpnman.main import main

if __name__ == "__main__":
    sys.exit(main())
