"""Inline SVG diagrams.

Diagram markup comes from the build-time curated fragments and is inserted
verbatim, without sanitization. This is only safe while the fragment
pipeline itself is trusted; runtime user input must never reach here.
"""

from __future__ import annotations

from typing import Optional

CONTAINER_CLASS = "svg-diagram"


class DiagramRenderer:
    """Render raw SVG markup into an isolated container."""

    def __init__(self, container_class: str = CONTAINER_CLASS) -> None:
        self.container_class = container_class

    def render(self, svg: Optional[str]) -> Optional[str]:
        """
        Wrap ``svg`` in its container, or return None for absent/blank markup.

        Example:
            >>> DiagramRenderer().render("<svg/>")
            '<div class="svg-diagram"><svg/></div>'
            >>> DiagramRenderer().render("") is None
            True
        """
        if not svg or not svg.strip():
            return None
        return f'<div class="{self.container_class}">{svg}</div>'
