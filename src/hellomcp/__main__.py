"""Allow ``python -m hellomcp``."""

from hellomcp.cli import main

if __name__ == "__main__":
    main()
