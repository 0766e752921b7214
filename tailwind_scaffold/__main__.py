"""Allow ``python -m tailwind_scaffold``."""

import sys

from tailwind_scaffold.cli.commands import main

if __name__ == "__main__":
    sys.exit(main())
