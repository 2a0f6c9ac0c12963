"""
Module: builder.merge

Purpose:
    Fold fragments into the exam database under an explicit merge policy.
"""

from .merger import (
    COURSE_DEFAULTS,
    DatabaseMerger,
    DuplicateExamError,
    MergeError,
    MergePolicy,
    exam_key,
    merge,
)

__all__ = [
    "COURSE_DEFAULTS",
    "DatabaseMerger",
    "DuplicateExamError",
    "MergeError",
    "MergePolicy",
    "exam_key",
    "merge",
]
