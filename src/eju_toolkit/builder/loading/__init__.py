"""
Module: builder.loading

Purpose:
    Fragment discovery, decoding and question normalization.

Key Functions:
    - discover_fragments(): Fragment files in ascending name order
    - read_fragment(): Decode one fragment file
    - normalize_question(): Raw question → CanonicalQuestion

Used By:
    - builder.controller
    - builder.merge.merger
"""

from .loader import (
    DecodeError,
    Fragment,
    LoaderError,
    discover_fragments,
    read_fragment,
)
from .normalizer import normalize_question, normalize_step

__all__ = [
    "DecodeError",
    "Fragment",
    "LoaderError",
    "discover_fragments",
    "read_fragment",
    "normalize_question",
    "normalize_step",
]
