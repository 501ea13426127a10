# tests/test_pipeline.py

from __future__ import annotations

import logging

import pytest

from family_tree_utils.config import get_config
from family_tree_utils.core.context import AnalysisContext
from family_tree_utils.core.exceptions import GedcomReadError, UnknownAnalyzerError
from family_tree_utils.core.pipeline import Pipeline
from family_tree_utils.utils import mock_file_path


def make_context(path, analyzer, title_codes=None):
    return AnalysisContext(
        config=get_config(),
        logger=logging.getLogger("test_pipeline"),
        input_path=str(path),
        analyzer=analyzer,
        title_codes=title_codes or [],
    )


def test_pipeline_returns_report_and_stats():
    ctx = make_context(mock_file_path("sample_family.ged"), "one-name")
    report = Pipeline(ctx).run()

    assert report.endswith("I5: Madonna")
    assert ctx.stats == {"individuals": 7, "families": 2}


def test_pipeline_passes_title_codes():
    ctx = make_context(mock_file_path("sample_family.ged"), "title", ["Rev."])
    assert "contains 'Rev.'" in Pipeline(ctx).run()


def test_pipeline_propagates_read_errors(tmp_path):
    ctx = make_context(tmp_path / "missing.ged", "one-name")
    with pytest.raises(GedcomReadError):
        Pipeline(ctx).run()


def test_pipeline_unknown_analyzer():
    ctx = make_context(mock_file_path("sample_family.ged"), "nope")
    with pytest.raises(UnknownAnalyzerError):
        Pipeline(ctx).run()
