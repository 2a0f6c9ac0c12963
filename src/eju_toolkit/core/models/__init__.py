"""
Core models package.

Frozen dataclasses for the canonical question shape and the nested
course → exam → question database, plus the mutable build report.
"""

from .questions import CanonicalQuestion, CanonicalSolution, CanonicalStep
from .database import Course, CourseSummary, Exam, ExamDatabase
from .report import BuildReport

__all__ = [
    "CanonicalQuestion",
    "CanonicalSolution",
    "CanonicalStep",
    "Course",
    "CourseSummary",
    "Exam",
    "ExamDatabase",
    "BuildReport",
]
