"""
Module: builder.output.injector

Purpose:
    Substitute the serialized exam database into the viewer template.
    The template carries exactly one placeholder statement,

        const examDatabase = __EXAM_DATABASE__;

    which is replaced by the same binding pointing at a literal.

Key Functions:
    - inject(): Template + database → document text
    - extract_database(): Document text → database (inverse of inject)
    - placeholder_statement(): The exact statement searched for

Key Classes:
    - InjectionError: Base exception
    - PlaceholderNotFoundError: Template has no placeholder statement
    - AmbiguousPlaceholderError: Template has more than one

Dependencies:
    - core.utils.serialization: Script-safe JSON text

Used By:
    - builder.controller
"""

from __future__ import annotations

import json
import logging

from eju_toolkit.core.models import ExamDatabase
from eju_toolkit.core.utils.serialization import database_to_json

logger = logging.getLogger(__name__)

DEFAULT_BINDING = "examDatabase"
DEFAULT_PLACEHOLDER = "__EXAM_DATABASE__"


class InjectionError(Exception):
    """Error injecting data into a template."""
    pass


class PlaceholderNotFoundError(InjectionError):
    """The template does not contain the placeholder statement."""

    def __init__(self, statement: str, message: str | None = None):
        super().__init__(message or f"Placeholder statement not found in template: {statement}")
        self.statement = statement


class AmbiguousPlaceholderError(PlaceholderNotFoundError):
    """The template contains the placeholder statement more than once."""

    def __init__(self, statement: str, count: int):
        super().__init__(
            statement, f"Placeholder statement appears {count} times in template: {statement}"
        )
        self.count = count


def placeholder_statement(
    binding: str = DEFAULT_BINDING,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """
    Example:
        >>> placeholder_statement()
        'const examDatabase = __EXAM_DATABASE__;'
    """
    return f"const {binding} = {placeholder};"


def inject(
    template: str,
    db: ExamDatabase,
    *,
    binding: str = DEFAULT_BINDING,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """
    Replace the placeholder statement with a literal binding of ``db``.

    The substitution is literal text replacement; nothing in the data is
    interpreted as a replacement pattern.

    Args:
        template: Template text
        db: Merged database
        binding: Name bound to the database in the template
        placeholder: Token the binding initially points at

    Returns:
        Document text with the database inlined

    Raises:
        PlaceholderNotFoundError: If the statement is absent
        AmbiguousPlaceholderError: If the statement appears more than once
    """
    statement = placeholder_statement(binding, placeholder)
    count = template.count(statement)
    if count == 0:
        raise PlaceholderNotFoundError(statement)
    if count > 1:
        raise AmbiguousPlaceholderError(statement, count)

    literal = database_to_json(db)
    head, tail = template.split(statement, 1)
    logger.debug(f"Injected {len(literal)} characters of data into template")
    return f"{head}const {binding} = {literal};{tail}"


def _in_comment(document: str, index: int) -> bool:
    """True if ``index`` sits inside a // line comment or a /* */ block."""
    line_start = document.rfind("\n", 0, index) + 1
    if "//" in document[line_start:index]:
        return True
    return document.rfind("/*", 0, index) > document.rfind("*/", 0, index)


def extract_database(document: str, *, binding: str = DEFAULT_BINDING) -> ExamDatabase:
    """
    Decode the database literal back out of an injected document.

    Mentions of the binding inside comments are skipped; the first
    statement whose literal decodes to an object wins.

    Raises:
        InjectionError: If no binding is found or its literal is not valid JSON
    """
    marker = f"const {binding} = "
    decoder = json.JSONDecoder()
    error: InjectionError | None = None

    start = document.find(marker)
    while start >= 0:
        if not _in_comment(document, start):
            try:
                data, _ = decoder.raw_decode(document, start + len(marker))
            except json.JSONDecodeError as e:
                error = InjectionError(f"Invalid literal for {binding}: {e}")
            else:
                if isinstance(data, dict):
                    return ExamDatabase.from_dict(data)
                error = InjectionError(f"Literal for {binding} is not an object")
        start = document.find(marker, start + len(marker))

    if error is None:
        raise InjectionError(f"Binding not found in document: {binding}")
    raise error
