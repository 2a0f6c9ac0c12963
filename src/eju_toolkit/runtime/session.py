"""
Module: runtime.session

Purpose:
    Composition root for one viewer load. Owns the single ResourceLoader,
    one NavigationController and one DisclosureController, all created
    fresh per load. The database is read-only here.

Key Classes:
    - ViewerSession: Navigation + disclosure + renderer factories

Dependencies:
    - runtime.navigation, runtime.disclosure, runtime.math_text,
      runtime.diagrams, runtime.resources

Behaviour:
    Disclosure is scoped to the question list being shown. Leaving it
    (back to the paper list) closes every panel, so reopening a paper
    starts with all solutions collapsed.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from eju_toolkit.core.models import ExamDatabase

from .diagrams import DiagramRenderer
from .disclosure import DisclosureController
from .math_text import MathEngine, MathRenderer
from .navigation import NavigationController, NavigationError, QuestionList
from .resources import ResourceLoader


class ViewerSession:
    """
    Session state for one document load.

    Example:
        >>> session = ViewerSession(db, loader, engine)
        >>> session.select_subject("course1")
        >>> session.select_paper("2011-1")
        >>> session.toggle_solution("q1")
        True
    """

    def __init__(
        self,
        database: ExamDatabase,
        loader: ResourceLoader,
        engine: MathEngine,
    ) -> None:
        self.database = database
        self.loader = loader
        self.engine = engine
        self.navigation = NavigationController(database)
        self.disclosure = DisclosureController()
        self.diagrams = DiagramRenderer()

    # Navigation

    def select_subject(self, subject_id: str) -> None:
        self.navigation.select_subject(subject_id)

    def select_paper(self, paper_id: str) -> None:
        self.navigation.select_paper(paper_id)

    def back(self) -> None:
        leaving_questions = isinstance(self.navigation.state, QuestionList)
        self.navigation.back()
        if leaving_questions:
            self.disclosure.reset()

    # Disclosure (scoped to the open paper)

    def _question_key(self, question_id: Any) -> Tuple[str, str, Any]:
        state = self.navigation.state
        if not isinstance(state, QuestionList):
            raise NavigationError("No paper is open")
        return (state.subject_id, state.paper_id, question_id)

    def toggle_solution(self, question_id: Any) -> bool:
        return self.disclosure.toggle(self._question_key(question_id))

    def is_solution_open(self, question_id: Any) -> bool:
        return self.disclosure.is_open(self._question_key(question_id))

    def toggle_why(self, question_id: Any, step_index: int) -> bool:
        return self.disclosure.toggle_why(self._question_key(question_id), step_index)

    def is_why_open(self, question_id: Any, step_index: int) -> bool:
        return self.disclosure.is_why_open(self._question_key(question_id), step_index)

    # Renderers

    def math(self, text: Any) -> MathRenderer:
        """A mounted math renderer sharing this session's loader."""
        renderer = MathRenderer(text, self.loader, self.engine)
        renderer.mount()
        return renderer

    def diagram(self, svg: Optional[str]) -> Optional[str]:
        return self.diagrams.render(svg)
