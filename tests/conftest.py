"""Shared fixtures for prdiff tests."""

import json
from pathlib import Path

import pytest


def make_result(fingerprints=None, level="warning", text="Issue", uri="app.py", line=1, rule="rule"):
    """Build a SARIF result with the fields prdiff reads."""
    result = {
        "ruleId": rule,
        "level": level,
        "message": {"text": text},
        "locations": [
            {
                "physicalLocation": {
                    "artifactLocation": {"uri": uri},
                    "region": {"startLine": line},
                }
            }
        ],
    }
    if fingerprints is not None:
        result["fingerprints"] = fingerprints
    return result


def make_report(results):
    return {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [{"tool": {"driver": {"name": "SnykCode"}}, "results": results}],
    }


@pytest.fixture
def sarif_file(tmp_path: Path):
    """Write a SARIF report with the given results to a temp file."""

    def _create(results, filename: str = "scan.json") -> Path:
        p = tmp_path / filename
        p.write_text(json.dumps(make_report(results)))
        return p

    return _create
