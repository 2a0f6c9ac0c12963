"""
Module: builder.output.writer

Purpose:
    Write the finished document to disk. The text is written to a
    temporary file beside the target and moved into place, so a failed
    write never leaves a truncated document behind.

Key Functions:
    - write_document(): Write text to a path, creating parent directories

Dependencies:
    - tempfile (std)

Used By:
    - builder.controller
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_document(path: Path, text: str) -> int:
    """
    Write ``text`` to ``path`` as UTF-8 (atomic replace).

    Args:
        path: Output file path (parents created as needed)
        text: Document contents

    Returns:
        Number of bytes written

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = text.encode("utf-8")

    with tempfile.NamedTemporaryFile(
        mode="wb",
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=path.parent,
        delete=False,
    ) as f:
        f.write(data)
        temp_path = Path(f.name)

    try:
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return len(data)
