"""Allow running as ``python -m auto_release``."""

from __future__ import annotations

from auto_release.cli.app import main

if __name__ == "__main__":
    main()
