"""JSON serialization for Velo objects.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from typing import Iterable

from velo_builder.models.velo import Velo


def to_dict(velo: Velo, builder_id: str | None = None) -> dict:
    """Convert a Velo to a JSON-compatible dict."""
    return {
        "builder": builder_id,
        "parts": list(velo.list_parts()),
        "partCount": len(velo),
    }


def to_json_string(velo: Velo, builder_id: str | None = None, indent: int = 2) -> str:
    """Convert a Velo to a formatted JSON string."""
    return json.dumps(to_dict(velo, builder_id), indent=indent)


def to_json_list(
    velos: Iterable[Velo], builder_id: str | None = None, indent: int = 2,
) -> str:
    """Convert several Velos to a formatted JSON array string."""
    return json.dumps([to_dict(velo, builder_id) for velo in velos], indent=indent)
