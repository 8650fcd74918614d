"""Allow `python -m zcb_pricer`."""

import sys

from zcb_pricer.cli import main

if __name__ == "__main__":
    sys.exit(main())
