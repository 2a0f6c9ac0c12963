"""
Fragment Validation Utilities

Checks one decoded fragment before it is merged.

Basic mode (always on):
- Top-level object with a ``metadata`` object
- Truthy ``metadata.course``, ``metadata.year``, ``metadata.session``
- ``questions`` (when present) is a list of objects
- Per question: ``solution`` and ``questionDiagram`` are objects, and
  ``solution.steps`` is a list of objects whose ``diagram`` is an object
  (each may be absent)

Strict mode additionally validates the whole fragment against
``fragment.schema.json`` using jsonschema.

Every failure here is recoverable for the build: the caller records the
message and skips the entire fragment.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


REQUIRED_METADATA = ("course", "year", "session")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a fragment fails validation."""

    def __init__(
        self,
        message: str,
        source: str = "",
        path: str = "",
        errors: list[str] | None = None,
    ):
        super().__init__(message)
        self.source = source
        self.path = path
        self.errors = errors or []


class MissingMetadataError(ValidationError):
    """Required metadata fields are absent or empty."""

    def __init__(self, source: str, missing: list[str]):
        fields = ", ".join(missing)
        super().__init__(
            f"Missing metadata: {source} ({fields})",
            source=source,
            path="metadata",
            errors=[f"Missing field: metadata.{f}" for f in missing],
        )
        self.missing = missing


class FragmentSchemaError(ValidationError):
    """Fragment structure does not match the expected shape."""


def validate_fragment(
    data: Any,
    source: str = "",
    *,
    strict: bool = False,
) -> None:
    """
    Validate one decoded fragment.

    Args:
        data: Decoded JSON value of the fragment file
        source: File identifier used in error messages
        strict: If True, also run full JSON Schema validation

    Raises:
        MissingMetadataError: If course/year/session are missing or empty
        FragmentSchemaError: If questions are malformed or strict checks fail

    Example:
        >>> validate_fragment({"metadata": {"course": "course1", "year": 2011,
        ...                                 "session": 1}, "questions": []})
    """
    meta = data.get("metadata") if isinstance(data, dict) else None
    if not isinstance(meta, dict):
        raise MissingMetadataError(source, list(REQUIRED_METADATA))

    missing = [f for f in REQUIRED_METADATA if not meta.get(f)]
    if missing:
        raise MissingMetadataError(source, missing)

    questions = data.get("questions")
    if questions is not None:
        if not isinstance(questions, list):
            raise FragmentSchemaError(
                f"questions must be a list: {source}",
                source=source,
                path="questions",
            )
        for i, q in enumerate(questions):
            _check_question(q, f"questions.{i}", source)

    if strict:
        _validate_schema(data, source)


def _validate_schema(data: dict[str, Any], source: str) -> None:
    """Full schema validation; collects every violation, reports the most relevant."""
    validator = jsonschema.Draft202012Validator(_load_schema("fragment"))
    violations = list(validator.iter_errors(data))
    if not violations:
        return
    first = jsonschema.exceptions.best_match(violations)
    raise FragmentSchemaError(
        f"Schema validation failed: {source} - {first.message}",
        source=source,
        path=".".join(str(p) for p in first.absolute_path),
        errors=[v.message for v in violations],
    )


def _check_shape(value: Any, expected: type, path: str, source: str) -> None:
    """Absent (None) is allowed; anything else must be ``expected``."""
    if value is not None and not isinstance(value, expected):
        kind = "a list" if expected is list else "an object"
        raise FragmentSchemaError(
            f"{path} must be {kind}: {source}",
            source=source,
            path=path,
        )


def _check_question(question: Any, path: str, source: str) -> None:
    """Shapes the normalizer relies on: objects where it reads keys, lists where it iterates."""
    if not isinstance(question, dict):
        raise FragmentSchemaError(f"{path} must be an object: {source}", source=source, path=path)

    _check_shape(question.get("questionDiagram"), dict, f"{path}.questionDiagram", source)

    solution = question.get("solution")
    _check_shape(solution, dict, f"{path}.solution", source)
    if solution is None:
        return

    steps = solution.get("steps")
    _check_shape(steps, list, f"{path}.solution.steps", source)
    for j, step in enumerate(steps or ()):
        step_path = f"{path}.solution.steps.{j}"
        if not isinstance(step, dict):
            raise FragmentSchemaError(
                f"{step_path} must be an object: {source}", source=source, path=step_path
            )
        _check_shape(step.get("diagram"), dict, f"{step_path}.diagram", source)
