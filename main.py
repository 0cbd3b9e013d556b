"""Main entry point for the catch pattern analysis."""
from __future__ import annotations

import sys

from dotenv import load_dotenv

from app.startup import run_application


def main() -> None:
    """Application entry point."""
    # Environment overrides may live in a .env file next to the data
    load_dotenv()
    sys.exit(run_application(sys.argv[1:]))


__all__ = ["main"]

if __name__ == "__main__":
    main()
