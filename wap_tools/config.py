"""Run configuration: YAML file + command-line overrides, schema-checked.

Relative paths in a config file resolve against the config file's directory.
Command-line paths are taken as given (relative to the working directory).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import jsonschema
import yaml

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "classify_config_schema.json"
PATH_KEYS = ("corpus", "war_terms", "peace_terms", "output", "expected", "summary", "log_file")


@dataclass(frozen=True)
class ClassifyConfig:
    corpus: str
    war_terms: str
    peace_terms: str
    output: str
    expected: Optional[str] = None
    summary: Optional[str] = None
    log_file: Optional[str] = None


def load_schema() -> dict:
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


def validate_config(data: dict, source: str = "<config>") -> None:
    try:
        jsonschema.validate(data, load_schema())
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "(root)"
        raise RuntimeError(f"{source} fails schema validation at {where}: {e.message}")


def read_config_file(path: str) -> dict:
    """Load a YAML config and resolve its relative paths. Does not validate."""
    if not os.path.exists(path):
        raise RuntimeError(f"Config file '{path}' does not exist.")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RuntimeError(f"Config file '{path}' is not valid YAML: {e}")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RuntimeError(f"Config file '{path}' must be a YAML mapping.")

    base = os.path.dirname(os.path.abspath(path))
    resolved = dict(data)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if isinstance(value, str) and value and not os.path.isabs(value):
            resolved[key] = os.path.normpath(os.path.join(base, value))
    return resolved


def build_config(config_path: str | None = None, overrides: dict | None = None) -> ClassifyConfig:
    """Merge a config file (optional) with overrides (None values ignored)."""
    data = read_config_file(config_path) if config_path else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value
    validate_config(data, source=config_path or "command line")
    return ClassifyConfig(**data)
