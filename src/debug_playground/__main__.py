"""Allow running as ``python -m debug_playground``."""

from debug_playground.main import main

if __name__ == "__main__":
    main()
