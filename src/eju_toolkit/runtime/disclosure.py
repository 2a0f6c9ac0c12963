"""Progressive disclosure state.

Each question has a solution panel and each solution step may have a
"why?" aside. Every panel is an independent boolean, closed by default;
toggling one never affects another.
"""

from __future__ import annotations

from typing import Hashable, Set, Tuple


class DisclosureController:
    """Open/closed state for solution panels and why-asides."""

    def __init__(self) -> None:
        self._open_solutions: Set[Hashable] = set()
        self._open_whys: Set[Tuple[Hashable, int]] = set()

    # Solution panels

    def is_open(self, question_key: Hashable) -> bool:
        return question_key in self._open_solutions

    def open(self, question_key: Hashable) -> None:
        self._open_solutions.add(question_key)

    def close(self, question_key: Hashable) -> None:
        self._open_solutions.discard(question_key)

    def toggle(self, question_key: Hashable) -> bool:
        """Flip a solution panel; returns the new state."""
        if question_key in self._open_solutions:
            self._open_solutions.discard(question_key)
            return False
        self._open_solutions.add(question_key)
        return True

    # Why-asides, keyed by (question, step index)

    def is_why_open(self, question_key: Hashable, step_index: int) -> bool:
        return (question_key, step_index) in self._open_whys

    def toggle_why(self, question_key: Hashable, step_index: int) -> bool:
        key = (question_key, step_index)
        if key in self._open_whys:
            self._open_whys.discard(key)
            return False
        self._open_whys.add(key)
        return True

    def reset(self) -> None:
        """Close everything."""
        self._open_solutions.clear()
        self._open_whys.clear()

    @property
    def open_count(self) -> int:
        return len(self._open_solutions) + len(self._open_whys)
