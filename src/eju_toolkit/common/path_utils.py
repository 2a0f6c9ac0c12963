"""Path and filename utilities.

Provides shared functions for locating fragment files and resolving the
command-line path overrides against the working directory.
"""

from __future__ import annotations

from pathlib import Path


def is_fragment_file(path: str | Path, suffix: str = ".json") -> bool:
    """Check whether a path names a fragment file.

    Only regular files with the recognised suffix qualify. The suffix match
    is case-sensitive so ``notes.JSON`` exported by some editors is ignored,
    matching how the data directory is curated.

    Args:
        path: File path to check.
        suffix: Recognised suffix including the leading dot.

    Returns:
        True if the path is a fragment file.

    Examples:
        >>> is_fragment_file("README.md")
        False
    """
    path = Path(path)
    return path.name.endswith(suffix) and path.is_file()


def list_fragment_files(data_dir: Path, suffix: str = ".json") -> list[Path]:
    """List fragment files in ascending name order.

    The ordering is by file name only (not full path) so results are stable
    across machines. Subdirectories are not searched.

    Args:
        data_dir: Directory holding one fragment file per exam paper.
        suffix: Recognised suffix including the leading dot.

    Returns:
        Sorted list of fragment file paths.
    """
    files = [p for p in data_dir.iterdir() if is_fragment_file(p, suffix)]
    return sorted(files, key=lambda p: p.name)


def resolve_path(value: str | Path, base: Path | None = None) -> Path:
    """Resolve a possibly relative path against ``base`` (default: cwd).

    Examples:
        >>> resolve_path("/abs/out.jsx")
        PosixPath('/abs/out.jsx')
    """
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base or Path.cwd()) / path
    return path.resolve()
