"""
Module: builder

Purpose:
    Build pipeline that merges per-paper fragment files into one exam
    database and injects it into the viewer template.

Key Functions:
    - merge(): Merge decoded fragments into (ExamDatabase, BuildReport)
    - inject(): Substitute the database into a template
    - build_document(): Main entry point (discover → merge → inject → write)

Key Classes:
    - BuilderConfig: Configuration for building
    - DatabaseMerger: Incremental merger
    - MergePolicy: Duplicate exam handling

Used By:
    - eju_toolkit.cli
"""

from .config import BuilderConfig
from .loading import Fragment, LoaderError, DecodeError, normalize_question, read_fragment
from .merge import DatabaseMerger, DuplicateExamError, MergePolicy, merge
from .output import PlaceholderNotFoundError, extract_database, inject
from .controller import build_document, BuildResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    # Loading
    "Fragment",
    "LoaderError",
    "DecodeError",
    "normalize_question",
    "read_fragment",
    # Merge
    "DatabaseMerger",
    "DuplicateExamError",
    "MergePolicy",
    "merge",
    # Output
    "PlaceholderNotFoundError",
    "extract_database",
    "inject",
    # Controller
    "build_document",
    "BuildResult",
    "BuildError",
]
