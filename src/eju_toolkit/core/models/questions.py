"""
Module: questions

Purpose:
    Provides the canonical question dataclasses - the render-ready records
    stored in the exam database. Raw fragment questions are converted into
    these by builder.loading.normalizer; the runtime only ever sees this shape.

Key Classes:
    - CanonicalStep: One solution step (title, content, optional aside/diagram)
    - CanonicalSolution: Translation, analysis, ordered steps, final answer
    - CanonicalQuestion: One question with its solution

Key Functions:
    - CanonicalQuestion.to_dict() / CanonicalQuestion.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.database.Exam
    - builder.loading.normalizer
    - runtime.session

Wire Format:
    Serialized keys are camelCase (topicTag, humanVerified, finalAnswer,
    questionDiagramSvg, diagramSvg) because the injected literal is read
    directly by the viewer template. Optional keys are omitted when absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

QuestionId = Union[str, int]


@dataclass(frozen=True)
class CanonicalStep:
    """
    One step of a worked solution (immutable).

    Attributes:
        title: Short step heading (may contain math)
        content: Step body, multi-line text with $...$ / $$...$$ math
        why: Optional explanatory aside shown behind a toggle
        diagram_svg: Optional inline SVG markup, hoisted from ``diagram.svg``
    """

    title: Optional[str]
    content: Optional[str]
    why: Optional[str] = None
    diagram_svg: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"title": self.title, "content": self.content}
        if self.why is not None:
            data["why"] = self.why
        if self.diagram_svg is not None:
            data["diagramSvg"] = self.diagram_svg
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalStep":
        return cls(
            title=data.get("title"),
            content=data.get("content"),
            why=data.get("why"),
            diagram_svg=data.get("diagramSvg"),
        )


@dataclass(frozen=True)
class CanonicalSolution:
    """
    Worked solution for a question (immutable).

    Attributes:
        translation: Chinese translation of the question text
        analysis: Approach summary shown before the steps
        steps: Ordered steps, source order preserved exactly
        final_answer: Final answer text
    """

    translation: Optional[str]
    analysis: Optional[str]
    steps: tuple[CanonicalStep, ...] = ()
    final_answer: Optional[str] = None

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "translation": self.translation,
            "analysis": self.analysis,
            "steps": [step.to_dict() for step in self.steps],
            "finalAnswer": self.final_answer,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalSolution":
        return cls(
            translation=data.get("translation"),
            analysis=data.get("analysis"),
            steps=tuple(CanonicalStep.from_dict(s) for s in data.get("steps") or ()),
            final_answer=data.get("finalAnswer"),
        )


@dataclass(frozen=True)
class CanonicalQuestion:
    """
    Normalized, render-ready question (immutable).

    Attributes:
        id: Question identifier from the fragment (unique within its exam)
        number: Display number like "問1"
        topic: Topic heading
        topic_tag: Short tag shown as a badge
        human_verified: Whether a person checked the solution (default False)
        question: Original question text (from the raw ``japanese`` field)
        solution: Worked solution, or None if the fragment had none
        question_diagram_svg: Optional SVG for the question itself

    Example:
        >>> q = CanonicalQuestion(id="q1", number="問1", topic="Quadratics",
        ...                       topic_tag="2次関数", question="$x^2=1$",
        ...                       solution=None)
        >>> q.to_dict()["humanVerified"]
        False
    """

    id: QuestionId
    number: Any
    topic: Optional[str]
    topic_tag: Optional[str]
    question: Optional[str]
    solution: Optional[CanonicalSolution]
    human_verified: bool = False
    question_diagram_svg: Optional[str] = None

    @property
    def has_diagrams(self) -> bool:
        """True if the question or any of its steps carries SVG markup."""
        if self.question_diagram_svg:
            return True
        if self.solution is None:
            return False
        return any(step.diagram_svg for step in self.solution.steps)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "number": self.number,
            "topic": self.topic,
            "topicTag": self.topic_tag,
            "humanVerified": self.human_verified,
            "question": self.question,
            "solution": self.solution.to_dict() if self.solution is not None else None,
        }
        if self.question_diagram_svg is not None:
            data["questionDiagramSvg"] = self.question_diagram_svg
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalQuestion":
        """Rebuild from ``to_dict()`` output (no normalization applied)."""
        solution = data.get("solution")
        return cls(
            id=data.get("id"),
            number=data.get("number"),
            topic=data.get("topic"),
            topic_tag=data.get("topicTag"),
            question=data.get("question"),
            solution=CanonicalSolution.from_dict(solution) if solution is not None else None,
            human_verified=bool(data.get("humanVerified", False)),
            question_diagram_svg=data.get("questionDiagramSvg"),
        )
