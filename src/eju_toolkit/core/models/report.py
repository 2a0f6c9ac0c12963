"""
Module: report

Purpose:
    Provides BuildReport - the counters and messages accumulated while
    merging fragments. Not persisted into the database; consumed only by the
    human-readable build summary.

Key Classes:
    - BuildReport: Mutable accumulator (one per merge)

Used By:
    - builder.merge.merger
    - builder.summary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass
class BuildReport:
    """
    Counters for one build pass.

    Attributes:
        total: Questions merged from non-skipped fragments
        passed: Questions whose source ``answer_match`` was truthy
        needs_review: Questions whose source ``needs_review`` was truthy
        errors: One message per skipped fragment
        warnings: Non-fatal notices such as replaced exams
    """

    total: int = 0
    passed: int = 0
    needs_review: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def record_question(self, raw: Mapping[str, Any]) -> None:
        """Count one raw question record."""
        self.total += 1
        if raw.get("answer_match"):
            self.passed += 1
        if raw.get("needs_review"):
            self.needs_review += 1

    def record_error(self, message: str) -> None:
        self.errors.append(message)

    def record_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "needsReview": self.needs_review,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
