"""
scanning
========

Changed-file scanning for workflow configuration payloads.

This module narrows the changed files of a branch down to the JSON payloads
worth validating:

- :func:`filter_sql_files` keeps migration files by suffix
- :func:`is_config_impacting` flags files that mention the marker
- :func:`extract_json_literals` pulls ``'{...}'`` literals out of SQL text

Design choices
--------------
- Extraction is a regex heuristic, not a SQL tokenizer. A literal containing a
  single quote (including the SQL ``''`` escape) is not matched.
- Read errors are raised, not swallowed; :mod:`wfsqlcheck.pipeline` decides
  to record them and move on.

"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Union

DEFAULT_MARKER = "workflow_config"
DEFAULT_EXTENSION = ".sql"

JSON_LITERAL_RE = re.compile(r"'{[^']*}'")


def filter_sql_files(paths: Iterable[str], extension: str = DEFAULT_EXTENSION) -> List[str]:
    """Return the paths ending with *extension* (case-sensitive), in input order."""
    return [p for p in paths if p.endswith(extension)]


def read_source(root: Union[str, Path], rel_path: str) -> str:
    """Read ``root/rel_path`` as UTF-8 text.

    Line endings are kept as they are on disk. Undecodable bytes are replaced
    rather than raising, so only genuine I/O problems (missing file,
    permissions, directory) surface as ``OSError``.
    """
    return (Path(root) / rel_path).read_bytes().decode("utf-8", errors="replace")


def is_config_impacting(root: Union[str, Path], rel_path: str, marker: str = DEFAULT_MARKER) -> bool:
    """Return True if the file contains *marker* anywhere.

    Raises
    ------
    OSError
        If the file cannot be read (e.g. deleted on the working branch).
    """
    return marker in read_source(root, rel_path)


def find_json_literals(text: str) -> List[str]:
    """Return every single-quoted ``{...}`` literal in *text*, quotes removed.

    Examples
    --------
    >>> find_json_literals("UPDATE t SET c = '{\\"a\\":1}' WHERE id=1;")
    ['{"a":1}']
    >>> find_json_literals("SELECT 1;")
    []
    """
    return [m.group(0)[1:-1] for m in JSON_LITERAL_RE.finditer(text)]


def extract_json_literals(root: Union[str, Path], rel_path: str) -> List[str]:
    """Read a SQL file and return its embedded JSON literals in source order.

    Raises
    ------
    OSError
        If the file cannot be read.
    """
    return find_json_literals(read_source(root, rel_path))
