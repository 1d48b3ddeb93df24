# file: src/module4_symbol/__main__.py

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
