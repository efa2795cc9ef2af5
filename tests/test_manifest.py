"""Tests for reading the integration version."""

from __future__ import annotations

import json
from pathlib import Path

from custom_components.rinnai_heater.manifest import UNKNOWN_VERSION, manifest_version

MANIFEST = Path(__file__).parent.parent / "custom_components" / "rinnai_heater" / "manifest.json"


def test_version_matches_manifest():
    """The device registry version is read from manifest.json."""
    expected = json.loads(MANIFEST.read_text(encoding="utf-8"))["version"]
    assert manifest_version() == expected
    assert manifest_version() != UNKNOWN_VERSION
