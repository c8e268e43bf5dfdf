"""
Run with: python -m hourpuzzle
"""
import sys

from hourpuzzle.main import main

if __name__ == "__main__":
    sys.exit(main())
