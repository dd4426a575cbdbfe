"""Tests for report loading and results extraction."""

import pytest

from prdiff.errors import ReportParseError, ReportReadError, ResultsNotFoundError
from prdiff.loader import extract_results, load_report, require_results

from conftest import make_report, make_result


class TestLoadReport:
    def test_load(self, sarif_file):
        path = sarif_file([make_result({"0": "a"})])
        data = load_report(str(path))
        assert data["runs"][0]["results"][0]["fingerprints"] == {"0": "a"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReportReadError, match="Failed to read the Baseline JSON file"):
            load_report(str(tmp_path / "missing.json"), "Baseline")

    def test_truncated_json(self, tmp_path):
        p = tmp_path / "bad.json"
        p.write_text('{"runs": [{"results": [')
        with pytest.raises(ReportParseError, match="Failed to parse the PR JSON scan"):
            load_report(str(p), "PR")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, tmp_path, constant):
        p = tmp_path / "scan.json"
        p.write_text('{"runs": [{"results": []}], "x": ' + constant + "}")
        with pytest.raises(ReportParseError, match="invalid JSON constant"):
            load_report(str(p), "Baseline")

    def test_deeply_nested(self, tmp_path):
        p = tmp_path / "deep.json"
        p.write_text("[" * 100000 + "]" * 100000)
        with pytest.raises(ReportParseError, match="Failed to parse the Baseline JSON scan"):
            load_report(str(p), "Baseline")

    def test_non_object_root(self, tmp_path):
        p = tmp_path / "list.json"
        p.write_text("[1, 2]")
        with pytest.raises(ReportParseError, match="expected an object"):
            load_report(str(p))


class TestExtractResults:
    def test_found(self):
        results = [make_result({"0": "a"})]
        assert extract_results(make_report(results)) == (results, True)

    def test_empty_results_still_found(self):
        assert extract_results(make_report([])) == ([], True)

    @pytest.mark.parametrize("report", [
        {},
        {"runs": []},
        {"runs": "nope"},
        {"runs": ["not-a-run"]},
        {"runs": [{}]},
        {"runs": [{"results": {"0": "a"}}]},
    ])
    def test_not_found(self, report):
        assert extract_results(report) == ([], False)

    def test_only_first_run(self):
        report = {"runs": [{"results": [1]}, {"results": [2, 3]}]}
        assert extract_results(report) == ([1], True)

    def test_require_results_raises(self):
        with pytest.raises(ResultsNotFoundError, match="from the Baseline scan"):
            require_results({"runs": []}, "the Baseline")

    def test_require_results_pr_wording(self):
        with pytest.raises(ResultsNotFoundError, match="from PR scan"):
            require_results({}, "PR")
