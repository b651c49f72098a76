# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering of validation runs."""

from __future__ import annotations

from .logging import detail, fail, ok
from .validator import DocumentReport, ValidationRun


def render_report(report: DocumentReport, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print the outcome of one document.

    Valid documents get a single success line. Structural errors are printed
    verbatim, consistency errors as bullets, each followed by a summary line.
    """

    if report.schema_errors:
        for error in report.schema_errors:
            detail(error, use_color=use_color)
        fail(f"{report.name} has issues!", use_emoji=use_emoji, use_color=use_color)
    elif report.consistency_errors:
        for error in report.consistency_errors:
            detail(f" * {error}", use_color=use_color)
        fail(f"{report.name} has inconsistent data!", use_emoji=use_emoji, use_color=use_color)
    else:
        ok(f"{report.name} looks good!", use_emoji=use_emoji, use_color=use_color)


def render_run(run: ValidationRun, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print every report of ``run`` in order."""

    for report in run.reports:
        render_report(report, use_emoji=use_emoji, use_color=use_color)


__all__ = ["render_report", "render_run"]
