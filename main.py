"""
Entrypoint: run one batch download using config/config.json
"""

import sys

from getjpg.app import main


if __name__ == "__main__":
    sys.exit(main())
