"""
validation
==========

Workflow definition validation.

The pipeline only needs a *capability*: a callable that takes the raw JSON
text of a payload and raises :class:`WorkflowValidationError` when it is not
an acceptable workflow definition. Anything matching :data:`Validator` can be
injected, which keeps :mod:`wfsqlcheck.pipeline` testable without a schema.

:class:`WorkflowSchemaValidator` is the real implementation. It validates
against the Serverless Workflow definition schema bundled at
``wfsqlcheck/schemas/workflow.json`` (draft-07), or a replacement schema file.

"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "workflow.json"

Validator = Callable[[str], None]


class WorkflowValidationError(ValueError):
    """Raised when a payload is not valid JSON or breaks the workflow schema."""


def load_schema(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Load and check a JSON schema file.

    Parameters
    ----------
    path:
        Schema file. Defaults to the bundled workflow schema.

    Raises
    ------
    SystemExit
        If the file is missing, is not JSON, or is not a valid draft-07 schema.
    """
    schema_path = Path(path) if path is not None else DEFAULT_SCHEMA_PATH
    if not schema_path.exists():
        raise SystemExit(f"ERROR: schema file not found: {schema_path}")
    try:
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SystemExit(f"ERROR: schema file is not valid JSON: {schema_path}: {e}") from e
    if not isinstance(schema, dict):
        raise SystemExit(f"ERROR: schema must be a JSON object: {schema_path}")
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        raise SystemExit(f"ERROR: invalid schema {schema_path}: {e.message}") from e
    return schema


def _error_path(error: Any) -> str:
    return ".".join(str(p) for p in error.absolute_path) or "<root>"


class WorkflowSchemaValidator:
    """Validate JSON text against a workflow definition schema.

    Instances are callable, so they can be passed wherever a
    :data:`Validator` is expected.

    Examples
    --------
    >>> validate = WorkflowSchemaValidator()
    >>> validate('{"id": "w", "specVersion": "0.8", '
    ...          '"states": [{"name": "s", "type": "inject", "data": {}, "end": true}]}')
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        self.schema = schema if schema is not None else load_schema()
        self._validator = Draft7Validator(self.schema)

    @classmethod
    def from_path(cls, path: Union[str, Path, None]) -> "WorkflowSchemaValidator":
        """Build a validator from a schema file (bundled schema when *path* is None)."""
        return cls(load_schema(path))

    def __call__(self, text: str) -> None:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise WorkflowValidationError(f"invalid JSON: {e}") from e

        errors = sorted(self._validator.iter_errors(document), key=lambda err: list(map(str, err.absolute_path)))
        if errors:
            raise WorkflowValidationError("; ".join(f"{_error_path(err)}: {err.message}" for err in errors))
