"""Convenience shim to regenerate CONTRIBUTIONS.md."""

from __future__ import annotations

import sys

from contributions.report import main


if __name__ == "__main__":
    sys.exit(main())
