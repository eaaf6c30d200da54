"""Allow ``python -m mst_toolkit``."""

from mst_toolkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
