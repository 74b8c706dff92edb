"""Module entry point.

Invokes the CLI main function when the package is executed
with python -m cssbuilder.
"""

import sys

from cssbuilder.cli import main

if __name__ == '__main__':
    sys.exit(main())
