"""Package entry point for ``python -m porcus``.

WHY: Python's ``-m`` flag looks for ``__main__.py`` inside the package.
This lets the filter run without the installed ``porcus`` console script.

HOW: Delegates to the CLI's main() and uses its return value as the exit
status.
"""

import sys

from porcus.cli import main

if __name__ == "__main__":
    sys.exit(main())
