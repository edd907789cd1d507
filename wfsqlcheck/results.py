"""
results
=======

Result records and the ``suggestions.json`` report.

The report is a list of *problems*: a payload that validates cleanly produces
no entry. Each entry is written with the keys ``fileName``, ``jsonData`` and
``error``; ``jsonData`` is empty when the file itself could not be read.

Primary API
-----------
- :class:`Result`
- :func:`save_results`

"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

DEFAULT_OUTPUT = "suggestions.json"


@dataclass(frozen=True)
class Result:
    """One recorded failure.

    Attributes:
        file_name: Path of the SQL file, relative to the repository root.
        json_data: The offending payload (empty for read failures).
        error: Human-readable error message.
    """

    file_name: str
    json_data: str
    error: str

    def to_dict(self) -> Dict[str, str]:
        """Return the report representation (camel-cased keys)."""
        return {"fileName": self.file_name, "jsonData": self.json_data, "error": self.error}


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# Always written as \u escapes; these characters only occur inside JSON strings.
HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def dumps_results(results: Iterable[Result]) -> str:
    """Serialize results as a JSON array indented one space per level.

    Non-ASCII text is written as-is; ``<``, ``>``, ``&``, U+2028 and U+2029 are
    written as ``\\uXXXX`` escapes. Both forms decode to the same JSON.
    """
    out = json.dumps([r.to_dict() for r in results], indent=1, ensure_ascii=False)
    for char, escape in HTML_ESCAPES.items():
        out = out.replace(char, escape)
    return out


def save_results(results: Sequence[Result], path: Union[str, Path] = DEFAULT_OUTPUT) -> Path:
    """Write *results* to *path*, replacing any previous report.

    Parameters
    ----------
    results:
        Results in the order they were recorded.
    path:
        Output file. Defaults to ``suggestions.json`` in the working directory.

    Returns
    -------
    pathlib.Path
        The path written.

    Raises
    ------
    OSError
        If the file cannot be written.
    """
    out_path = Path(path)
    write_text(out_path, dumps_results(results))
    return out_path


def summarize(results: Iterable[Result]) -> List[str]:
    """Return one ``<file>: <n> issue(s)`` line per file, in first-seen order."""
    counts = Counter(r.file_name for r in results)
    return [f"{name}: {n} issue(s)" for name, n in counts.items()]
