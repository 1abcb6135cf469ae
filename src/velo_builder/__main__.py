"""Allow ``python -m velo_builder``."""

from velo_builder.client import main

raise SystemExit(main())
