"""
Module: builder.loading.normalizer

Purpose:
    Convert one raw fragment question into the canonical question shape.
    Pure transform: copies a fixed field set, defaults humanVerified to
    False, and hoists nested diagram markup to flat sibling fields.

Key Functions:
    - normalize_question(): Raw question record → CanonicalQuestion
    - normalize_step(): Raw step record → CanonicalStep

Dependencies:
    - core.models.questions

Used By:
    - builder.merge.merger

Idempotency:
    Already-canonical input (``question`` instead of ``japanese``,
    ``questionDiagramSvg``/``diagramSvg`` instead of nested ``diagram.svg``)
    is accepted, so normalize_question(normalize_question(q).to_dict())
    equals normalize_question(q).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from eju_toolkit.core.models.questions import (
    CanonicalQuestion,
    CanonicalSolution,
    CanonicalStep,
)


def _hoist_svg(record: Mapping[str, Any], nested_key: str, flat_key: str) -> Optional[str]:
    """Return ``record[nested_key]["svg"]`` if set, else ``record[flat_key]``."""
    nested = record.get(nested_key)
    if isinstance(nested, Mapping) and nested.get("svg"):
        return nested["svg"]
    return record.get(flat_key) or None


def normalize_step(raw: Mapping[str, Any]) -> CanonicalStep:
    """
    Normalize one solution step.

    ``diagram.svg`` becomes ``diagram_svg``; the nested ``diagram`` key does
    not survive. A null ``why`` is treated as absent.
    """
    return CanonicalStep(
        title=raw.get("title"),
        content=raw.get("content"),
        why=raw.get("why"),
        diagram_svg=_hoist_svg(raw, "diagram", "diagramSvg"),
    )


def _normalize_solution(raw: Any) -> Optional[CanonicalSolution]:
    if not isinstance(raw, Mapping):
        return None
    return CanonicalSolution(
        translation=raw.get("translation"),
        analysis=raw.get("analysis"),
        steps=tuple(normalize_step(s) for s in raw.get("steps") or ()),
        final_answer=raw.get("finalAnswer"),
    )


def normalize_question(raw: Mapping[str, Any]) -> CanonicalQuestion:
    """
    Normalize one raw question record.

    Args:
        raw: Question object from a fragment's ``questions`` array

    Returns:
        CanonicalQuestion with steps in source order

    Example:
        >>> q = normalize_question({
        ...     "id": "q1", "number": "問1", "topic": "Sets", "topicTag": "集合",
        ...     "japanese": "集合 A を求めよ",
        ...     "questionDiagram": {"svg": "<svg/>"},
        ...     "solution": {"translation": "", "analysis": "",
        ...                  "steps": [], "finalAnswer": "{1}"},
        ... })
        >>> q.question_diagram_svg, q.human_verified
        ('<svg/>', False)
    """
    question = raw["japanese"] if "japanese" in raw else raw.get("question")
    return CanonicalQuestion(
        id=raw.get("id"),
        number=raw.get("number"),
        topic=raw.get("topic"),
        topic_tag=raw.get("topicTag"),
        question=question,
        solution=_normalize_solution(raw.get("solution")),
        human_verified=bool(raw.get("humanVerified") or False),
        question_diagram_svg=_hoist_svg(raw, "questionDiagram", "questionDiagramSvg"),
    )
