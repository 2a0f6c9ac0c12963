"""
Module: builder.controller

Purpose:
    Orchestrate the complete build pipeline.
    Discover → Read → Validate/Merge → Inject → Write

Key Functions:
    - build_document(): Main entry point for building the study document

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build-fatal failures

Dependencies:
    - builder.loading: Fragment discovery and decoding
    - builder.merge: Database merging
    - builder.output: Template injection and writing

Used By:
    - cli: Command-line entry point

Failure Model:
    Per-fragment problems (decode, metadata, duplicates under STRICT) are
    recorded in the report and the build continues. Missing data directory,
    missing template or a bad placeholder raise BuildError before anything
    is written.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from eju_toolkit.core.models import BuildReport, ExamDatabase

from .config import BuilderConfig
from .loading import LoaderError, discover_fragments, read_fragment
from .merge import DatabaseMerger
from .output import InjectionError, inject, write_document

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_path: Path of the written document
        database: Merged database that was injected
        report: Counters and per-fragment errors
        fragment_files: Names of the fragment files processed, in order
        size_bytes: Size of the written document
        elapsed_seconds: Wall time for the whole build

    Example:
        >>> result = build_document(config)
        >>> print(f"{result.database.question_count} questions, {result.size_kb:.1f} KB")
    """

    output_path: Path
    database: ExamDatabase
    report: BuildReport
    fragment_files: tuple[str, ...]
    size_bytes: int
    elapsed_seconds: float = 0.0

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024


def build_document(config: BuilderConfig) -> BuildResult:
    """
    Build the study document from start to finish.

    Pipeline:
    1. Check the data directory and template exist
    2. Discover fragment files in ascending name order
    3. Read, validate and merge each fragment in that order
    4. Inject the merged database into the template
    5. Write the document

    Args:
        config: Build configuration

    Returns:
        BuildResult with the database, report and output path

    Raises:
        BuildError: If the data directory or template is missing, the
            template has no usable placeholder, or the output can't be written

    Example:
        >>> config = BuilderConfig.from_args(data="data", out="dist/eju-math.jsx")
        >>> result = build_document(config)
        >>> result.report.total
        42
    """
    start_time = time.perf_counter()

    logger.info(f"Data directory: {config.data_dir}")
    logger.info(f"Template file: {config.template_path}")
    logger.info(f"Output file: {config.output_path}")

    # 1. Fatal preconditions
    if not config.data_dir.is_dir():
        raise BuildError(f"Data directory does not exist: {config.data_dir}")
    if not config.template_path.is_file():
        raise BuildError(f"Template file does not exist: {config.template_path}")

    try:
        template = config.template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BuildError(f"Failed to read template: {e}") from e

    # 2. Discover
    try:
        files = discover_fragments(config.data_dir, config.suffix)
    except LoaderError as e:
        raise BuildError(str(e)) from e

    # 3. Read + merge, strictly in file order
    merger = DatabaseMerger(policy=config.merge_policy, strict_schema=config.strict_schema)
    for path in files:
        try:
            fragment = read_fragment(path)
        except LoaderError as e:
            merger.add_failure(e)
            continue
        merger.add(fragment)

    database, report = merger.result()
    logger.info(
        f"Merged {database.question_count} questions into "
        f"{database.exam_count} exams across {database.course_count} courses"
    )

    # 4. Inject (before any write, so a bad template leaves no output)
    try:
        document = inject(
            template,
            database,
            binding=config.binding,
            placeholder=config.placeholder,
        )
    except InjectionError as e:
        raise BuildError(str(e)) from e

    # 5. Write
    try:
        size_bytes = write_document(config.output_path, document)
    except OSError as e:
        raise BuildError(f"Failed to write output: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Build completed in {elapsed:.2f}s")

    return BuildResult(
        output_path=config.output_path,
        database=database,
        report=report,
        fragment_files=tuple(p.name for p in files),
        size_bytes=size_bytes,
        elapsed_seconds=elapsed,
    )
