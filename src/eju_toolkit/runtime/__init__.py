"""
Module: runtime

Purpose:
    Viewer-side state for the generated document: single-flight loading of
    the typesetting engine, math/diagram rendering, drill-down navigation
    and per-question disclosure. Nothing here mutates the database.

Key Classes:
    - ResourceLoader: Single-flight engine loader
    - MathRenderer / DiagramRenderer: Content renderers
    - NavigationController: Subject → paper → question navigation
    - DisclosureController: Solution / why-aside toggles
    - ViewerSession: Composition root for one load
"""

from .resources import AssetFetcher, EngineAssets, LoadState, ResourceLoader
from .math_text import MATH_DELIMITERS, Delimiter, MathEngine, MathRenderer, split_lines
from .diagrams import DiagramRenderer
from .navigation import (
    NavigationController,
    NavigationError,
    NavState,
    PaperList,
    QuestionList,
    SubjectList,
)
from .disclosure import DisclosureController
from .session import ViewerSession

__all__ = [
    "AssetFetcher",
    "EngineAssets",
    "LoadState",
    "ResourceLoader",
    "MATH_DELIMITERS",
    "Delimiter",
    "MathEngine",
    "MathRenderer",
    "split_lines",
    "DiagramRenderer",
    "NavigationController",
    "NavigationError",
    "NavState",
    "PaperList",
    "QuestionList",
    "SubjectList",
    "DisclosureController",
    "ViewerSession",
]
