"""Human-readable build summary.

Turns a BuildResult into the lines printed at the end of a build: report
counters, skipped-fragment errors, per-course counts and output totals.
"""

from __future__ import annotations

from typing import List

from eju_toolkit.core.models import BuildReport, ExamDatabase

from .controller import BuildResult

RULE = "=" * 50


def format_report(report: BuildReport) -> List[str]:
    lines = [
        RULE,
        "Build report",
        RULE,
        f"Total questions: {report.total}",
        f"Answer matched: {report.passed}",
        f"Needs review: {report.needs_review}",
    ]
    if report.errors:
        lines.append("Errors:")
        lines.extend(f"  {e}" for e in report.errors)
    if report.warnings:
        lines.append("Warnings:")
        lines.extend(f"  {w}" for w in report.warnings)
    return lines


def format_courses(database: ExamDatabase) -> List[str]:
    return [
        f"{s.name} ({s.course_id}): {s.exam_count} exams, {s.question_count} questions"
        for s in database.summaries()
    ]


def format_summary(result: BuildResult) -> List[str]:
    """All summary lines for a finished build, in print order."""
    db = result.database
    lines = format_report(result.report)
    lines.append("")
    lines.extend(format_courses(db))
    lines.append("")
    lines.append(f"Build complete: {result.output_path} ({result.size_kb:.1f} KB)")
    lines.append(f"  Courses: {db.course_count}")
    lines.append(f"  Exams: {db.exam_count}")
    lines.append(f"  Questions: {result.report.total}")
    return lines
