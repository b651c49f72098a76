# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for console rendering of validation results."""

from __future__ import annotations

import pytest

from chart_catalog.reporting import render_report, render_run
from chart_catalog.validator import DocumentReport, fold_reports


def test_valid_report(capsys: pytest.CaptureFixture[str]) -> None:
    render_report(DocumentReport(name="ddr.json"), use_emoji=False, use_color=False)
    captured = capsys.readouterr()
    assert captured.out == "ddr.json looks good!\n"
    assert captured.err == ""


def test_consistency_report(capsys: pytest.CaptureFixture[str]) -> None:
    report = DocumentReport(name="ddr.json", consistency_errors=("max level is below 1", "missing jacket image a.png"))
    render_report(report, use_emoji=False, use_color=False)
    captured = capsys.readouterr()
    assert captured.err == " * max level is below 1\n * missing jacket image a.png\n"
    assert captured.out == "ddr.json has inconsistent data!\n"


def test_schema_report(capsys: pytest.CaptureFixture[str]) -> None:
    report = DocumentReport(name="ddr.json", schema_errors=("$.meta: 'lvlMax' is a required property",))
    render_report(report, use_emoji=False, use_color=False)
    captured = capsys.readouterr()
    assert captured.err == "$.meta: 'lvlMax' is a required property\n"
    assert captured.out == "ddr.json has issues!\n"


def test_emoji_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    render_report(DocumentReport(name="smx.json"), use_emoji=True, use_color=False)
    assert capsys.readouterr().out == "✅ smx.json looks good!\n"


def test_render_run_keeps_order(capsys: pytest.CaptureFixture[str]) -> None:
    run = fold_reports(
        [
            DocumentReport(name="a.json"),
            DocumentReport(name="b.json", consistency_errors=("default style is not listed in meta",)),
            DocumentReport(name="c.json"),
        ],
    )
    render_run(run, use_emoji=False, use_color=False)
    assert capsys.readouterr().out == "a.json looks good!\nb.json has inconsistent data!\nc.json looks good!\n"
    assert not run.ok
