"""
config
======

Optional YAML configuration.

Without a config file every setting has a built-in default, so a bare
``wfsqlcheck <root> <working> <base>`` behaves the same on every machine.

Example ``config.yml``::

    output: suggestions.json
    scan:
      marker: workflow_config
      extension: .sql
    validation:
      schema: schemas/custom-workflow.json

Command-line flags override values read from the file.

"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .results import DEFAULT_OUTPUT
from .scanning import DEFAULT_EXTENSION, DEFAULT_MARKER


@dataclass(frozen=True)
class Settings:
    """Tunables for one run."""
    marker: str = DEFAULT_MARKER
    extension: str = DEFAULT_EXTENSION
    output: str = DEFAULT_OUTPUT
    schema: Optional[str] = None  # None = bundled workflow schema


def load_config(path: Path) -> Dict[str, Any]:
    """Load a YAML config file; an empty file yields an empty dict."""
    if not path.exists():
        raise SystemExit(f"ERROR: config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise SystemExit(f"ERROR: config file must contain a mapping: {path}")
    return cfg


def deep_get(d: Mapping[str, Any], keys: List[str], default: Any = None) -> Any:
    """Safely get nested dict value with default."""
    cur: Any = d
    for k in keys:
        if not isinstance(cur, Mapping) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _non_empty(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise SystemExit(f"ERROR: {field} must be a non-empty string, got {value!r}")
    return value


def read_settings(cfg: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None) -> Settings:
    """Build :class:`Settings` from a config mapping plus CLI overrides.

    Parameters
    ----------
    cfg:
        Parsed config (may be empty).
    overrides:
        Values from the command line keyed by setting name; ``None`` values
        are ignored.
    """
    overrides = overrides or {}

    marker = _non_empty(deep_get(cfg, ["scan", "marker"], DEFAULT_MARKER), "scan.marker")
    extension = _non_empty(deep_get(cfg, ["scan", "extension"], DEFAULT_EXTENSION), "scan.extension")
    output = _non_empty(cfg.get("output", DEFAULT_OUTPUT), "output")
    schema = deep_get(cfg, ["validation", "schema"])
    if schema is not None:
        schema = _non_empty(schema, "validation.schema")

    if overrides.get("output"):
        output = overrides["output"]
    if overrides.get("schema"):
        schema = overrides["schema"]

    return Settings(marker=marker, extension=extension, output=output, schema=schema)
