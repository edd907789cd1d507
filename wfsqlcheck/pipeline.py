"""
pipeline
========

One pass over the changed files of a branch.

For every candidate SQL file the pipeline checks for the marker, extracts the
embedded JSON literals and validates each of them. Failures are returned as an
ordered list of :class:`~wfsqlcheck.results.Result`; nothing is kept between
calls.

Read errors and validation errors are recorded and the scan continues with the
next file or payload. Any other exception propagates.

"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from .config import Settings
from .results import Result
from .scanning import extract_json_literals, filter_sql_files, is_config_impacting
from .validation import Validator, WorkflowValidationError


def check_file(root: Union[str, Path], rel_path: str, validate: Validator, settings: Settings) -> List[Result]:
    """Check a single SQL file and return its failures (possibly none)."""
    try:
        impacting = is_config_impacting(root, rel_path, settings.marker)
    except OSError as e:
        print(f"Failed to open the file: {e}")
        return [Result(rel_path, "", str(e))]

    if not impacting:
        return []

    try:
        payloads = extract_json_literals(root, rel_path)
    except OSError as e:
        print(f"Failed to extract JSON data from the SQL file: {e}")
        return [Result(rel_path, "", str(e))]

    results: List[Result] = []
    for payload in payloads:
        try:
            validate(payload)
        except WorkflowValidationError as e:
            results.append(Result(rel_path, payload, str(e)))
    return results


def check_files(
    root: Union[str, Path],
    changed: Sequence[str],
    validate: Validator,
    settings: Settings = Settings(),
) -> List[Result]:
    """Run the scan over *changed* and return every failure in order.

    Parameters
    ----------
    root:
        Repository root the paths are relative to.
    changed:
        Changed paths, as listed by :func:`wfsqlcheck.git.changed_files`.
        Non-SQL paths are filtered out here.
    validate:
        Payload validator (see :mod:`wfsqlcheck.validation`).
    settings:
        Marker and extension to use.

    Returns
    -------
    list[Result]
        File order first, then extraction order within a file.
    """
    results: List[Result] = []
    for rel_path in filter_sql_files(changed, settings.extension):
        results.extend(check_file(root, rel_path, validate, settings))
    return results
