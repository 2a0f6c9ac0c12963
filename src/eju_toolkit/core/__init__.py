"""
EJU Toolkit Core Package

Shared data models, fragment validation and serialization. These models are
the single source of truth for the builder and the runtime.
"""

from .models import (
    BuildReport,
    CanonicalQuestion,
    CanonicalSolution,
    CanonicalStep,
    Course,
    Exam,
    ExamDatabase,
)

__all__ = [
    "BuildReport",
    "CanonicalQuestion",
    "CanonicalSolution",
    "CanonicalStep",
    "Course",
    "Exam",
    "ExamDatabase",
]
