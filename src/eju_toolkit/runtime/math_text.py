"""
Module: runtime.math_text

Purpose:
    Render multi-line text that contains TeX math. Lines are kept as
    explicit breaks; once the typesetting engine is ready, the engine is
    asked to scan the rendered container and typeset $$…$$ (display) and
    $…$ (inline) spans.

Key Functions:
    - split_lines(): Text → display lines

Key Classes:
    - MathRenderer: One math container bound to a text blob
    - MathEngine: Protocol for the external typesetting service
    - Delimiter: One math delimiter pair

Dependencies:
    - html (std): Line text escaping
    - runtime.resources: Single-flight engine loader

Used By:
    - runtime.session.ViewerSession
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any, List, Protocol, Sequence

from .resources import ResourceLoader


@dataclass(frozen=True)
class Delimiter:
    left: str
    right: str
    display: bool

    def to_dict(self) -> dict:
        return {"left": self.left, "right": self.right, "display": self.display}


# Order matters: "$$" must be tried before "$".
MATH_DELIMITERS: tuple[Delimiter, ...] = (
    Delimiter("$$", "$$", display=True),
    Delimiter("$", "$", display=False),
)


class MathEngine(Protocol):
    """External typesetting service (e.g. KaTeX auto-render)."""

    def render_math_in_element(self, element: Any, delimiters: Sequence[Delimiter]) -> None: ...


def split_lines(text: Any) -> List[str]:
    """
    Split a text blob into display lines.

    Example:
        >>> split_lines("a\\nb")
        ['a', 'b']
        >>> split_lines(None)
        ['']
    """
    return ("" if text is None else str(text)).split("\n")


class MathRenderer:
    """
    A math container bound to one text blob.

    ``mount()`` asks the loader for the engine; once ready the container is
    typeset. ``set_text()`` re-renders and, if already ready, typesets again.
    Typesetting is never attempted before readiness.
    """

    def __init__(
        self,
        text: Any,
        loader: ResourceLoader,
        engine: MathEngine,
        *,
        delimiters: Sequence[Delimiter] = MATH_DELIMITERS,
    ) -> None:
        self._text = text
        self._loader = loader
        self._engine = engine
        self._delimiters = tuple(delimiters)
        self._ready = loader.is_ready
        self._requested = False
        self.typeset_count = 0

    @property
    def text(self) -> Any:
        return self._text

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def lines(self) -> List[str]:
        return split_lines(self._text)

    def to_html(self) -> str:
        """Lines as spans with explicit <br /> between them."""
        lines = self.lines
        spans = []
        for i, line in enumerate(lines):
            brk = "<br />" if i < len(lines) - 1 else ""
            spans.append(f"<span>{html.escape(line, quote=False)}{brk}</span>")
        return f"<div>{''.join(spans)}</div>"

    def mount(self) -> None:
        if self._ready:
            self._typeset()
            return
        # One pending registration per renderer
        if self._requested:
            return
        self._requested = True
        self._loader.ensure(self._on_ready)

    def set_text(self, text: Any) -> None:
        if text == self._text:
            return
        self._text = text
        if self._ready:
            self._typeset()

    def _on_ready(self) -> None:
        self._ready = True
        self._typeset()

    def _typeset(self) -> None:
        self._engine.render_math_in_element(self, self._delimiters)
        self.typeset_count += 1
