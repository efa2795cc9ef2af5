"""Integration version as declared in manifest.json."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources

UNKNOWN_VERSION = "unknown"


@lru_cache(maxsize=1)
def manifest_version() -> str:
    """Read the version once; fall back to "unknown" when the manifest is missing or malformed."""
    manifest = resources.files(__package__) / "manifest.json"
    try:
        version = json.loads(manifest.read_text(encoding="utf-8")).get("version")
    except (OSError, ValueError, AttributeError):
        return UNKNOWN_VERSION
    return version if isinstance(version, str) and version else UNKNOWN_VERSION
