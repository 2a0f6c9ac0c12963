"""
Module: builder.loading.loader

Purpose:
    Read fragment files from the data directory. One file describes one
    exam paper; each is decoded independently so a broken file never
    affects its neighbours.

Key Functions:
    - read_fragment(): Decode one file into a Fragment
    - discover_fragments(): Fragment file paths in ascending name order

Key Classes:
    - Fragment: Decoded file contents plus its source name
    - LoaderError: Base exception for loading failures
    - DecodeError: File is not valid UTF-8 JSON

Dependencies:
    - json (std)
    - pathlib (std)
    - common.path_utils: Fragment file discovery

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from eju_toolkit.common.path_utils import list_fragment_files

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error loading fragments from the data directory."""
    pass


class DecodeError(LoaderError):
    """Fragment file could not be decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"JSON decode failed: {source} - {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True)
class Fragment:
    """
    One decoded fragment (ephemeral, lives for a single build pass).

    Attributes:
        source: File name used in logs and report messages
        data: Decoded JSON value; validated later by the merger
    """

    source: str
    data: Any

    @property
    def metadata(self) -> Dict[str, Any]:
        meta = self.data.get("metadata") if isinstance(self.data, dict) else None
        return meta if isinstance(meta, dict) else {}

    @property
    def questions(self) -> List[Dict[str, Any]]:
        if not isinstance(self.data, dict):
            return []
        return self.data.get("questions") or []


def read_fragment(path: Path) -> Fragment:
    """
    Decode one fragment file.

    Args:
        path: Path to a fragment file

    Returns:
        Fragment named after the file

    Raises:
        DecodeError: If the file is not valid UTF-8 or not valid JSON
        LoaderError: If the file cannot be read at all
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(path.name, str(e)) from e
    except OSError as e:
        raise LoaderError(f"Cannot read fragment {path.name}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(path.name, str(e)) from e

    return Fragment(source=path.name, data=data)


def discover_fragments(data_dir: Path, suffix: str = ".json") -> List[Path]:
    """
    Find fragment files in ascending file-name order.

    The order decides which of two fragments for the same exam wins, so it
    must be deterministic.

    Raises:
        LoaderError: If the data directory does not exist
    """
    if not data_dir.is_dir():
        raise LoaderError(f"Data directory does not exist: {data_dir}")

    files = list_fragment_files(data_dir, suffix)
    logger.info(f"Found {len(files)} fragment file(s) in {data_dir}")
    for path in files:
        logger.debug(f"  - {path.name}")
    return files
