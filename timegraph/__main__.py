"""Entry point for ``python -m timegraph``."""

from timegraph.cli import main

if __name__ == "__main__":
    main()
