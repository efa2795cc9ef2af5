"""Tests for the version bump script."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "update_version.py"


@pytest.fixture
def update_version():
    """Load scripts/update_version.py as a module."""
    spec = importlib.util.spec_from_file_location("update_version", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Minimal repository tree with the versioned files."""
    package = tmp_path / "custom_components" / "rinnai_heater"
    package.mkdir(parents=True)
    (package / "manifest.json").write_text(json.dumps({"domain": "rinnai_heater", "version": "1.0.0"}), encoding="utf-8")
    (package / "const.py").write_text('VERSION = "1.0.0"  # mirrored\n', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "rinnai-heater"\nversion = "1.0.0"\n', encoding="utf-8")
    return tmp_path


@pytest.mark.parametrize("version,valid", [("1.2.3", True), ("2026.10.1", True), ("1.2", False), ("v1.2.3", False)])
def test_validate_version(update_version, version, valid):
    """Only X.Y.Z is accepted."""
    assert update_version.validate_version(version) is valid


def test_updates_all_files(update_version, repo):
    """manifest.json, const.py and pyproject.toml are bumped together."""
    assert update_version.update_manifest_json("1.1.0", repo)
    assert update_version.update_const_py("1.1.0", repo)
    assert update_version.update_pyproject("1.1.0", repo)

    package = repo / "custom_components" / "rinnai_heater"
    assert json.loads((package / "manifest.json").read_text(encoding="utf-8"))["version"] == "1.1.0"
    assert (package / "const.py").read_text(encoding="utf-8") == 'VERSION = "1.1.0"  # mirrored\n'
    assert 'version = "1.1.0"' in (repo / "pyproject.toml").read_text(encoding="utf-8")


def test_dry_run_leaves_files(update_version, repo):
    """--dry-run reports without writing."""
    assert update_version.update_const_py("9.9.9", repo, dry_run=True)
    const = repo / "custom_components" / "rinnai_heater" / "const.py"
    assert 'VERSION = "1.0.0"' in const.read_text(encoding="utf-8")
