# main.py
import sys

from pathfinder.cli import main

if __name__ == "__main__":
    sys.exit(main())
