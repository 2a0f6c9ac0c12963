"""
Serialization Utilities

Provides to/from JSON text for the exam database.

- ``database_to_json()`` produces text that is at the same time valid JSON
  and a valid JavaScript object literal, so it can be injected straight into
  a script in the viewer template.
- ``database_from_json()`` is its inverse.
- Models handle their own ``to_dict()``/``from_dict()``; this module only
  deals with text.
"""

from __future__ import annotations

import json
from typing import Any

from ..models.database import ExamDatabase


# JSON allows these raw inside strings; script contexts do not.
_SCRIPT_UNSAFE = {
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
    "</": "<\\/",
}


def database_to_json(db: ExamDatabase, *, indent: int | None = 2) -> str:
    """
    Serialize a database to JSON text safe for embedding in a script.

    Non-ASCII text (Japanese, Chinese) is kept as-is rather than escaped so
    the output stays readable. Line/paragraph separators and ``</`` are
    escaped; decoding yields the original strings unchanged.

    Args:
        db: Database to serialize
        indent: Indentation passed to json.dumps (None for compact)

    Returns:
        JSON text
    """
    text = json.dumps(db.to_dict(), ensure_ascii=False, indent=indent)
    for raw, escaped in _SCRIPT_UNSAFE.items():
        text = text.replace(raw, escaped)
    return text


def database_from_json(text: str) -> ExamDatabase:
    """
    Deserialize a database from JSON text.

    Raises:
        ValueError: If the text is not valid JSON or not an object
    """
    data: Any = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return ExamDatabase.from_dict(data)
