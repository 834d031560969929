#!/usr/bin/env python3
"""wap-classify environment sanity-check.

Checks:
- Python version (>= 3.11)
- Every runtime dependency declared for wap-classify imports
- Repository root discovery (run from anywhere inside the checkout)

Inside a checkout the dependency list comes from pyproject.toml. Outside one
(the installed wap-check-env script run from elsewhere) it comes from the
installed wap-classify distribution metadata.
"""

from __future__ import annotations

import argparse
import importlib
import platform
import re
import sys
import tomllib
from importlib import metadata
from pathlib import Path

MIN_PY = (3, 11)
DIST_NAME = "wap-classify"

# distribution name (lowercase) -> import name, where they differ
IMPORT_NAMES = {
    "pyyaml": "yaml",
}


def search_repo_root(start: Path) -> Path | None:
    """Walk parents until a folder holds both pyproject.toml and wap_tools/."""
    cur = start.resolve()
    for _ in range(8):
        if (cur / "pyproject.toml").exists() and (cur / "wap_tools").is_dir():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent
    return None


def find_repo_root(start: Path) -> Path:
    repo = search_repo_root(start)
    if repo is None:
        raise SystemExit(
            "ERROR: Could not find the wap-classify repo root (folder with pyproject.toml and wap_tools/). "
            "Run from inside the checkout, or pass --repo-root."
        )
    return repo


def requirement_name(requirement: str) -> str | None:
    m = re.match(r"\s*([A-Za-z0-9][A-Za-z0-9._-]*)", requirement)
    return m.group(1) if m else None


def declared_dependencies(pyproject: Path) -> list[str]:
    """Distribution names from [project].dependencies, version specifiers dropped."""
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    names = []
    for requirement in data.get("project", {}).get("dependencies", []):
        name = requirement_name(requirement)
        if name:
            names.append(name)
    return names


def installed_dependencies(dist_name: str = DIST_NAME) -> list[str] | None:
    """Runtime requirement names of an installed distribution (extras skipped).

    Returns None when the distribution is not installed.
    """
    try:
        requirements = metadata.requires(dist_name) or []
    except metadata.PackageNotFoundError:
        return None
    names = []
    for requirement in requirements:
        _, _, marker = requirement.partition(";")
        if "extra" in marker:
            continue
        name = requirement_name(requirement)
        if name:
            names.append(name)
    return names


def get_installed_version(dist_name: str) -> str | None:
    try:
        return metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return None


def check_python_version() -> list[str]:
    issues: list[str] = []
    if sys.version_info < MIN_PY:
        issues.append(
            f"Python >= {MIN_PY[0]}.{MIN_PY[1]} required; found {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}."
        )
    return issues


def check_import(module: str, pip_name: str) -> tuple[bool, str | None]:
    try:
        importlib.import_module(module)
        return True, None
    except ImportError as e:
        return False, f"Missing module '{module}'. Install '{pip_name}' (pip install -e .). ({e})"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check the runtime environment for wap-classify.")
    ap.add_argument("--repo-root", default=None, help="Path to the repo root (contains pyproject.toml)")
    args = ap.parse_args(argv)

    if args.repo_root:
        repo = find_repo_root(Path(args.repo_root))
    else:
        repo = search_repo_root(Path.cwd())

    print("wap-classify environment check")
    print("-" * 72)
    print(f"Repo root: {repo or 'not inside a checkout'}")
    print(f"Python: {sys.executable}")
    print(f"Python version: {sys.version.splitlines()[0]}")
    print(f"OS: {platform.system()} {platform.release()}")

    issues: list[str] = []
    issues.extend(check_python_version())

    if repo is not None:
        source = "pyproject.toml"
        deps = declared_dependencies(repo / "pyproject.toml")
    else:
        source = f"installed {DIST_NAME} metadata"
        deps = installed_dependencies()
        if deps is None:
            issues.append(f"Not inside a checkout and {DIST_NAME} is not installed; nothing to check against.")
            deps = []

    print(f"\nDeclared dependencies ({source}):")
    for dist in deps:
        module = IMPORT_NAMES.get(dist.lower(), dist.lower().replace("-", "_"))
        ok, msg = check_import(module, dist)
        if not ok and msg:
            issues.append(msg)
            print(f"  - {dist}: NOT INSTALLED")
        else:
            print(f"  - {dist}: {get_installed_version(dist) or 'unknown version'}")

    print("\nResult:")
    if issues:
        print("ENV CHECK: FAIL")
        for i in issues:
            print(f"- {i}")
        print("\nFix:")
        print("  python -m venv .venv")
        if platform.system().lower().startswith("win"):
            print("  .\\.venv\\Scripts\\Activate.ps1")
        else:
            print("  source .venv/bin/activate")
        print("  python -m pip install -e '.[test]'")
        return 2

    print("ENV CHECK: PASS")
    print("Next:")
    print("  python -m wap_tools.classify_corpus --config data/sample/classify.yaml")
    return 0


if __name__ == "__main__":
    sys.exit(main())
