"""
Module: runtime.navigation

Purpose:
    Three-level drill-down navigation: subject list → paper list →
    question list. The state is an explicit tagged variant carrying its own
    selection, instead of being inferred from which optional ids are set.

Key Classes:
    - SubjectList / PaperList / QuestionList: The three navigation states
    - NavigationController: Transitions between them
    - NavigationError: Transition attempted from the wrong state

Dependencies:
    - core.models.database (optional, for view lookups)

Used By:
    - runtime.session.ViewerSession

Transitions:
    select_subject(id):  SubjectList → PaperList(id)
    select_paper(id):    PaperList(s) → QuestionList(s, id)
    back():              QuestionList(s, p) → PaperList(s)
                         PaperList(s) → SubjectList
                         SubjectList → SubjectList (no-op)

    Selected ids are not checked against the database; callers only offer
    ids they read from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from eju_toolkit.core.models import CanonicalQuestion, Course, Exam, ExamDatabase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubjectList:
    """Initial state: choose a subject."""


@dataclass(frozen=True)
class PaperList:
    """A subject is chosen: choose a paper."""

    subject_id: str


@dataclass(frozen=True)
class QuestionList:
    """A paper is chosen: its questions are shown."""

    subject_id: str
    paper_id: str


NavState = Union[SubjectList, PaperList, QuestionList]


class NavigationError(Exception):
    """Transition not allowed from the current state."""
    pass


class NavigationController:
    """
    Drill-down navigation state machine.

    There is no terminal state; the controller cycles for the life of the
    session.

    Example:
        >>> nav = NavigationController()
        >>> nav.select_subject("course1")
        >>> nav.select_paper("2011-1")
        >>> nav.back()
        >>> nav.state
        PaperList(subject_id='course1')
    """

    def __init__(self, database: Optional[ExamDatabase] = None) -> None:
        self._database = database
        self._state: NavState = SubjectList()

    @property
    def state(self) -> NavState:
        return self._state

    @property
    def subject_id(self) -> Optional[str]:
        if isinstance(self._state, (PaperList, QuestionList)):
            return self._state.subject_id
        return None

    @property
    def paper_id(self) -> Optional[str]:
        if isinstance(self._state, QuestionList):
            return self._state.paper_id
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def select_subject(self, subject_id: str) -> None:
        if not isinstance(self._state, SubjectList):
            raise NavigationError(f"Cannot select a subject from {type(self._state).__name__}")
        self._state = PaperList(subject_id)
        logger.debug(f"Navigated to papers of {subject_id}")

    def select_paper(self, paper_id: str) -> None:
        state = self._state
        if not isinstance(state, PaperList):
            raise NavigationError(f"Cannot select a paper from {type(state).__name__}")
        self._state = QuestionList(state.subject_id, paper_id)
        logger.debug(f"Navigated to questions of {state.subject_id} / {paper_id}")

    def back(self) -> None:
        state = self._state
        if isinstance(state, QuestionList):
            self._state = PaperList(state.subject_id)
        elif isinstance(state, PaperList):
            self._state = SubjectList()

    # ─────────────────────────────────────────────────────────────────────────
    # Database lookups (need a database)
    # ─────────────────────────────────────────────────────────────────────────

    def current_course(self) -> Optional[Course]:
        if self._database is None or self.subject_id is None:
            return None
        return self._database.course(self.subject_id)

    def current_exam(self) -> Optional[Exam]:
        if self._database is None or self.paper_id is None:
            return None
        return self._database.exam(self.subject_id, self.paper_id)

    def visible_items(self) -> Union[List[Course], List[Exam], List[CanonicalQuestion]]:
        """What the current level lists: courses, exams or questions."""
        if self._database is None:
            return []
        if isinstance(self._state, SubjectList):
            return list(self._database)
        if isinstance(self._state, PaperList):
            course = self.current_course()
            return list(course.exams.values()) if course else []
        exam = self.current_exam()
        return list(exam.questions) if exam else []
