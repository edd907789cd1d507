#!/usr/bin/env python3
"""
cli
===

Check the workflow JSON embedded in the SQL migrations changed on a branch.

The run:

- lists the files changed between ``<base>...<working>`` (``git diff --name-only``)
- keeps the ``.sql`` files that mention ``workflow_config``
- extracts every single-quoted ``'{...}'`` literal from them
- validates each literal against the Serverless Workflow definition schema
- writes the failures to ``suggestions.json``

Only a failing ``git diff`` (or a bad configuration) stops the run. Unreadable
files and invalid payloads are recorded in the report, and the exit status
stays 0: CI steps are expected to inspect the report.

CLI Usage
---------

Basic run::

    wfsqlcheck /path/to/repo feature/add-flow main

With a config file and a different report location::

    wfsqlcheck /path/to/repo feature/add-flow main --config config.yml --output out/suggestions.json

"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .config import load_config, read_settings
from .git import GitDiffError, changed_files, diff_command, ensure_git
from .pipeline import check_files
from .results import save_results, summarize
from .validation import WorkflowSchemaValidator


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wfsqlcheck",
        description="Validate workflow JSON embedded in SQL files changed between two Git branches.",
    )
    ap.add_argument("root", nargs="?", help="Path to the Git repository")
    ap.add_argument("working", nargs="?", help="Working branch (the branch under review)")
    ap.add_argument("base", nargs="?", help="Base branch to diff against")
    ap.add_argument("--config", default=None, help="Optional YAML config file")
    ap.add_argument("--output", default=None, help="Report path (default: suggestions.json)")
    ap.add_argument("--schema", default=None, help="Replacement workflow JSON schema file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI entry-point."""
    ap = build_parser()
    # arguments past the base branch are ignored
    args, _ = ap.parse_known_args(argv)

    if not (args.root and args.working and args.base):
        ap.print_usage(sys.stdout)
        return 0

    cfg: Dict[str, Any] = load_config(Path(args.config).resolve()) if args.config else {}
    settings = read_settings(cfg, {"output": args.output, "schema": args.schema})
    validate = WorkflowSchemaValidator.from_path(settings.schema)

    print("Root path: ", args.root)
    print("Working branch: ", args.working)
    print("Base branch: ", args.base)

    ensure_git()
    print("Command: ", " ".join(diff_command(args.root, args.working, args.base)))
    try:
        changed = changed_files(args.root, args.working, args.base)
    except GitDiffError as e:
        raise SystemExit(f"ERROR: failed to get git diff: {e}") from e

    print(f"Checking {len(changed)} changed file(s)...")
    results = check_files(args.root, changed, validate, settings)

    for line in summarize(results):
        print(f"  {line}")

    try:
        out_path = save_results(results, settings.output)
    except (OSError, TypeError, ValueError) as e:
        print("Failed to save the results: ", e)
        return 0

    print("\nDone.")
    print(f"Issues : {len(results)}")
    print(f"Report : {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
