#!/usr/bin/env python3
"""Update the integration version across this repository.

The version lives in `custom_components/rinnai_heater/manifest.json` (read at
runtime by `manifest_version()`) and is mirrored in the `VERSION` constant of
`custom_components/rinnai_heater/const.py` and in `pyproject.toml`.
"""
from __future__ import annotations

import argparse
import json
import os
import re
import sys
from pathlib import Path

PACKAGE_DIR = Path("custom_components") / "rinnai_heater"


def validate_version(version: str) -> bool:
    """Validate version format (semver: X.Y.Z)."""
    return bool(re.match(r"^\d+\.\d+\.\d+$", version))


def update_manifest_json(version: str, repo_root: Path, dry_run: bool = False) -> bool:
    """Update manifest.json version."""
    manifest_path = repo_root / PACKAGE_DIR / "manifest.json"
    try:
        with manifest_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        old_version = data.get("version", "")
        if old_version == version:
            return True  # No change needed
        if not dry_run:
            data["version"] = version
            with manifest_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
        print(f"{'[DRY RUN] ' if dry_run else ''}Updated manifest.json: {old_version} -> {version}")
        return True
    except (OSError, ValueError) as e:
        print(f"Error updating manifest.json: {e}", file=sys.stderr)
        return False


def _update_pattern(path: Path, pattern: str, version: str, label: str, dry_run: bool) -> bool:
    """Replace group 2 of pattern with version in a text file."""
    try:
        content = path.read_text(encoding="utf-8")
        match = re.search(pattern, content, flags=re.MULTILINE)
        if not match:
            print(f"Warning: Could not find version in {label}", file=sys.stderr)
            return False
        old_version = match.group(2)
        if old_version == version:
            return True  # No change needed
        if not dry_run:
            # Use \g<> to avoid backref ambiguity when version starts with digits.
            new_content = re.sub(pattern, rf"\g<1>{version}\g<3>", content, count=1, flags=re.MULTILINE)
            path.write_text(new_content, encoding="utf-8")
        print(f"{'[DRY RUN] ' if dry_run else ''}Updated {label}: {old_version} -> {version}")
        return True
    except OSError as e:
        print(f"Error updating {label}: {e}", file=sys.stderr)
        return False


def update_const_py(version: str, repo_root: Path, dry_run: bool = False) -> bool:
    """Update const.py VERSION constant."""
    return _update_pattern(repo_root / PACKAGE_DIR / "const.py", r'(VERSION = ")([^"]+)(")', version, "const.py", dry_run)


def update_pyproject(version: str, repo_root: Path, dry_run: bool = False) -> bool:
    """Update the project version in pyproject.toml."""
    return _update_pattern(repo_root / "pyproject.toml", r'^(version = ")([^"]+)(")', version, "pyproject.toml", dry_run)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Update version across all files in the repository")
    parser.add_argument("version", nargs="?", help="Integration version to set (e.g., 1.0.1)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be changed without making changes")
    args = parser.parse_args()

    version = (args.version or os.environ.get("VERSION") or "").lstrip("v")
    if not version:
        print("Error: version not provided. Use --help for usage.", file=sys.stderr)
        return 1
    if not validate_version(version):
        print(f"Error: Invalid version format: {version}. Expected format: X.Y.Z (e.g., 1.0.1)", file=sys.stderr)
        return 1

    # Find repository root (assume script is in scripts/ directory)
    repo_root = Path(__file__).parent.parent
    if not (repo_root / PACKAGE_DIR / "manifest.json").exists():
        print(f"Error: Could not find manifest.json under {repo_root / PACKAGE_DIR}", file=sys.stderr)
        return 1

    success = True
    success &= update_manifest_json(version, repo_root, args.dry_run)
    success &= update_const_py(version, repo_root, args.dry_run)
    success &= update_pyproject(version, repo_root, args.dry_run)

    if not success:
        print("\nSome errors occurred during version update.", file=sys.stderr)
        return 1
    if args.dry_run:
        print("\nDry run completed successfully. No files were modified.")
    else:
        print(f"\nIntegration version updated to {version}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
