"""
Entry point for running Kokwame as a module.

Usage:
    python -m kokwame diagnostics app.py
    python -m kokwame info app.py --line 12
"""

import sys
from kokwame.cli import main

if __name__ == "__main__":
    sys.exit(main())
