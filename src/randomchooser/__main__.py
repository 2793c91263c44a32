"""Allows `python -m randomchooser`."""
import sys

from randomchooser.main import main

if __name__ == "__main__":
    sys.exit(main())
