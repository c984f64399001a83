"""Allow ``python -m github_activity``."""

from __future__ import annotations

from .cli import main

raise SystemExit(main())
