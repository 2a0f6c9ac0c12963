"""
Module: builder.output

Purpose:
    Template injection and document writing.

Key Functions:
    - inject(): Substitute the database into the template
    - extract_database(): Read the database back out of a document
    - write_document(): Write the document, creating parent directories

Used By:
    - builder.controller: Pipeline orchestration
"""

from .injector import (
    AmbiguousPlaceholderError,
    DEFAULT_BINDING,
    DEFAULT_PLACEHOLDER,
    InjectionError,
    PlaceholderNotFoundError,
    extract_database,
    inject,
    placeholder_statement,
)
from .writer import write_document

__all__ = [
    "AmbiguousPlaceholderError",
    "DEFAULT_BINDING",
    "DEFAULT_PLACEHOLDER",
    "InjectionError",
    "PlaceholderNotFoundError",
    "extract_database",
    "inject",
    "placeholder_statement",
    "write_document",
]
