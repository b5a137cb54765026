import re

import pytest

from tsdoc_extractor.exceptions import InvalidPatternError
from tsdoc_extractor.extractor.exports import ResolvedExport
from tsdoc_extractor.extractor.filters import ExportFilter
from tsdoc_extractor.patterns import ES_MODULE_MARKER
from tsdoc_extractor.semantic import Symbol


def _exports(*names):
    return [ResolvedExport(name, Symbol(name)) for name in names]


def test_marker_always_ignored():
    export_filter = ExportFilter()
    assert export_filter.is_ignored("___esModule") is True
    assert export_filter.is_ignored("__esModule") is False
    assert export_filter.patterns == (ES_MODULE_MARKER,)


def test_caller_patterns_extend_marker():
    export_filter = ExportFilter(["^_", re.compile("Internal$")])
    assert len(export_filter.patterns) == 3
    assert export_filter.is_ignored("___esModule") is True
    assert export_filter.is_ignored("_hidden") is True
    assert export_filter.is_ignored("ApiInternal") is True
    assert export_filter.is_ignored("Api") is False


def test_patterns_search_anywhere():
    assert ExportFilter(["Private"]).is_ignored("isPrivateThing") is True


def test_apply_keeps_order():
    kept = ExportFilter(["^_"]).apply(_exports("b", "_x", "___esModule", "a"))
    assert [export.name for export in kept] == ["b", "a"]


def test_invalid_pattern():
    with pytest.raises(InvalidPatternError):
        ExportFilter(["("])
