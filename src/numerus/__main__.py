"""Точка входа: python -m src.numerus"""

import sys

from src.numerus.cli.repl import main

if __name__ == "__main__":
    sys.exit(main())
