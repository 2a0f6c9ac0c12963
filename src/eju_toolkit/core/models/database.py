"""
Module: database

Purpose:
    Provides the nested exam database: course → exam → question. This is
    the single artifact the builder produces and the viewer consumes. Built
    once per run, then read-only.

Key Classes:
    - Exam: One administered paper, keyed by "{year}-{session}"
    - Course: A subject grouping with its exams in first-seen order
    - ExamDatabase: Root mapping of course id → Course
    - CourseSummary: Exam/question counts for one course

Dependencies:
    - dataclasses (std)
    - .questions.CanonicalQuestion

Used By:
    - builder.merge.merger: Produces an ExamDatabase
    - builder.output.injector: Serializes it into the template
    - runtime.navigation: Indexes into it

Invariants:
    - Course and exam keys are unique within their parent (dict keys)
    - Exam.questions preserves the source fragment's array order
    - Course.exams and ExamDatabase.courses preserve insertion order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .questions import CanonicalQuestion


@dataclass(frozen=True)
class Exam:
    """
    One exam paper (immutable).

    Attributes:
        id: Exam key like "2011-1"
        title: Display title from fragment metadata
        date: Display date from fragment metadata
        questions: Canonical questions in source order
    """

    id: str
    title: Optional[str]
    date: Optional[str]
    questions: tuple[CanonicalQuestion, ...] = ()

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Exam":
        return cls(
            id=data["id"],
            title=data.get("title"),
            date=data.get("date"),
            questions=tuple(CanonicalQuestion.from_dict(q) for q in data.get("questions") or ()),
        )


@dataclass(frozen=True)
class Course:
    """
    A subject grouping (immutable).

    Course-level fields are fixed when the course is first created during a
    merge; later fragments for the same course only add or replace exams.

    Attributes:
        id: Course identifier like "course1"
        name: Display name (Japanese)
        name_en: English display name, may be empty
        description: Short description, may be empty
        color: Accent color as "#rrggbb"
        exams: Exams keyed by exam id, in first-seen order
    """

    id: str
    name: str
    name_en: str = ""
    description: str = ""
    color: str = ""
    exams: Dict[str, Exam] = field(default_factory=dict)

    @property
    def exam_count(self) -> int:
        return len(self.exams)

    @property
    def question_count(self) -> int:
        return sum(exam.question_count for exam in self.exams.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "nameEn": self.name_en,
            "description": self.description,
            "color": self.color,
            "exams": {key: exam.to_dict() for key, exam in self.exams.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Course":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            name_en=data.get("nameEn", ""),
            description=data.get("description", ""),
            color=data.get("color", ""),
            exams={key: Exam.from_dict(e) for key, e in (data.get("exams") or {}).items()},
        )


@dataclass(frozen=True)
class CourseSummary:
    """Counts shown on the subject list and in the build summary."""

    course_id: str
    name: str
    exam_count: int
    question_count: int


@dataclass(frozen=True)
class ExamDatabase:
    """
    Root of the merged content (immutable).

    Example:
        >>> db = ExamDatabase()
        >>> db.course_count, db.to_dict()
        (0, {})
    """

    courses: Dict[str, Course] = field(default_factory=dict)

    def __contains__(self, course_id: object) -> bool:
        return course_id in self.courses

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses.values())

    def __len__(self) -> int:
        return len(self.courses)

    # ─────────────────────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────────────────────

    def course(self, course_id: str) -> Optional[Course]:
        return self.courses.get(course_id)

    def exam(self, course_id: str, exam_id: str) -> Optional[Exam]:
        course = self.courses.get(course_id)
        if course is None:
            return None
        return course.exams.get(exam_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated counts
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def course_count(self) -> int:
        return len(self.courses)

    @property
    def exam_count(self) -> int:
        return sum(c.exam_count for c in self.courses.values())

    @property
    def question_count(self) -> int:
        return sum(c.question_count for c in self.courses.values())

    def summaries(self) -> List[CourseSummary]:
        """Per-course exam and question counts in course order."""
        return [
            CourseSummary(
                course_id=c.id,
                name=c.name,
                exam_count=c.exam_count,
                question_count=c.question_count,
            )
            for c in self.courses.values()
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        return {key: course.to_dict() for key, course in self.courses.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExamDatabase":
        return cls(courses={key: Course.from_dict(c) for key, c in data.items()})
