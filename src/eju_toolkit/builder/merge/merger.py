"""
Module: builder.merge.merger

Purpose:
    Fold an ordered list of fragments into the nested course → exam →
    question database while accumulating a BuildReport.

Key Functions:
    - merge(): Merge fragments in the supplied order
    - exam_key(): "{year}-{session}" key for a fragment's metadata

Key Classes:
    - DatabaseMerger: Incremental merger (one per build)
    - MergePolicy: What to do when two fragments share (course, exam key)
    - MergeError / DuplicateExamError: Merge conflicts

Dependencies:
    - core.schemas.validator: Fragment validation
    - builder.loading.normalizer: Question normalization
    - core.models: Database and report types

Used By:
    - builder.controller: Main build controller

Ordering:
    Fragments are applied strictly in the order given. Under
    LAST_WRITER_WINS that order decides which of two same-key fragments
    survives, so callers pass files in ascending name order.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from eju_toolkit.core.models import BuildReport, Course, Exam, ExamDatabase
from eju_toolkit.core.schemas.validator import ValidationError, validate_fragment
from eju_toolkit.builder.loading.loader import Fragment
from eju_toolkit.builder.loading.normalizer import normalize_question

logger = logging.getLogger(__name__)


# Course id → (display name, accent color), applied only when a course is created
COURSE_DEFAULTS: Dict[str, Tuple[str, str]] = {
    "course1": ("数学1", "#2563eb"),
    "course2": ("数学2", "#dc2626"),
}
FALLBACK_COLOR = "#57534e"


class MergePolicy(str, Enum):
    """Policy for a second fragment that targets an existing exam key."""

    LAST_WRITER_WINS = "last_writer_wins"  # Exam := incoming
    STRICT = "strict"  # Reject the later fragment


class MergeError(Exception):
    """Error merging a fragment into the database."""
    pass


class DuplicateExamError(MergeError):
    """A fragment targets an exam that an earlier fragment already defined."""

    def __init__(self, source: str, course_id: str, exam_id: str, first_source: str):
        super().__init__(
            f"Duplicate exam: {source} → {course_id} / {exam_id} "
            f"(already defined by {first_source})"
        )
        self.source = source
        self.course_id = course_id
        self.exam_id = exam_id
        self.first_source = first_source


def exam_key(metadata: Mapping[str, Any]) -> str:
    """
    Build the exam key from fragment metadata.

    Whole-number floats (``2011.0``) are written as integers, as a JSON
    number would print in the viewer.

    Example:
        >>> exam_key({"year": 2011, "session": 1})
        '2011-1'
        >>> exam_key({"year": 2011.0, "session": "2"})
        '2011-2'
    """
    return f"{_key_part(metadata['year'])}-{_key_part(metadata['session'])}"


def _key_part(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _new_course(course_id: str, metadata: Mapping[str, Any]) -> Course:
    default_name, default_color = COURSE_DEFAULTS.get(course_id, (course_id, FALLBACK_COLOR))
    return Course(
        id=course_id,
        name=metadata.get("courseNameJa") or default_name,
        name_en=metadata.get("courseNameEn") or "",
        description=metadata.get("description") or "",
        color=metadata.get("color") or default_color,
    )


class DatabaseMerger:
    """
    Incremental fragment merger.

    Course headers are fixed by the first fragment that mentions a course.
    Exams are keyed by "{year}-{session}"; how a repeated key is handled is
    decided by ``policy``. Nothing is shared between instances.

    Example:
        >>> merger = DatabaseMerger()
        >>> for fragment in fragments:
        ...     merger.add(fragment)
        >>> db, report = merger.result()
    """

    def __init__(
        self,
        *,
        policy: MergePolicy = MergePolicy.LAST_WRITER_WINS,
        strict_schema: bool = False,
    ) -> None:
        self.policy = policy
        self.strict_schema = strict_schema
        self.report = BuildReport()
        self._courses: Dict[str, Course] = {}
        self._exams: Dict[str, Dict[str, Exam]] = {}
        self._exam_sources: Dict[Tuple[str, str], str] = {}

    def add(self, fragment: Fragment) -> Optional[Exam]:
        """
        Merge one fragment.

        Validation and duplicate failures are recorded in the report and the
        whole fragment is skipped.

        Returns:
            The Exam written, or None if the fragment was skipped
        """
        try:
            validate_fragment(fragment.data, fragment.source, strict=self.strict_schema)
        except ValidationError as e:
            self.add_failure(e)
            return None

        meta = fragment.metadata
        course_id = str(meta["course"])
        key = exam_key(meta)

        previous = self._exam_sources.get((course_id, key))
        if previous is not None and self.policy is MergePolicy.STRICT:
            self.add_failure(DuplicateExamError(fragment.source, course_id, key, previous))
            return None

        # Normalize everything before touching the report or the course table
        raw_questions = fragment.questions
        exam = Exam(
            id=key,
            title=meta.get("examTitle"),
            date=meta.get("examDate"),
            questions=tuple(normalize_question(raw) for raw in raw_questions),
        )

        if course_id not in self._courses:
            self._courses[course_id] = _new_course(course_id, meta)
            self._exams[course_id] = {}

        for raw in raw_questions:
            self.report.record_question(raw)

        if previous is not None:
            message = f"{fragment.source} replaces {course_id} / {key} from {previous}"
            logger.warning(message)
            self.report.record_warning(message)

        # Overwriting an existing key keeps its original position
        self._exams[course_id][key] = exam
        self._exam_sources[(course_id, key)] = fragment.source

        logger.info(f"{fragment.source} → {course_id} / {key} ({exam.question_count} questions)")
        return exam

    def add_failure(self, error: Exception) -> None:
        """Record a recoverable per-fragment error (fragment skipped)."""
        logger.error(str(error))
        self.report.record_error(str(error))

    def database(self) -> ExamDatabase:
        """Snapshot of the merged content as an immutable database."""
        courses = {}
        for course_id, course in self._courses.items():
            courses[course_id] = Course(
                id=course.id,
                name=course.name,
                name_en=course.name_en,
                description=course.description,
                color=course.color,
                exams=dict(self._exams[course_id]),
            )
        return ExamDatabase(courses=courses)

    def result(self) -> Tuple[ExamDatabase, BuildReport]:
        return self.database(), self.report


def merge(
    fragments: Iterable[Fragment],
    *,
    policy: MergePolicy = MergePolicy.LAST_WRITER_WINS,
    strict_schema: bool = False,
) -> Tuple[ExamDatabase, BuildReport]:
    """
    Merge fragments in the order given.

    Args:
        fragments: Decoded fragments, in deterministic (file-name) order
        policy: Handling of repeated (course, exam key) pairs
        strict_schema: Validate each fragment against the full JSON Schema

    Returns:
        (ExamDatabase, BuildReport)

    Example:
        >>> db, report = merge([Fragment("a.json", {"metadata": {...}, "questions": [...]})])
        >>> report.total
        1
    """
    merger = DatabaseMerger(policy=policy, strict_schema=strict_schema)
    for fragment in fragments:
        merger.add(fragment)
    return merger.result()
