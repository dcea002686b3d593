"""Run the console demo: ``python -m shared_validators.demo``."""

import sys

from shared_validators.demo.console import main


if __name__ == "__main__":
    sys.exit(main())
