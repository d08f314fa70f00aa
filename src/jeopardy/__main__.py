"""
Run with: python -m jeopardy
"""
import sys

from jeopardy.main import main

if __name__ == "__main__":
    sys.exit(main())
