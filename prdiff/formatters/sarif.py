"""Write the PR scan back out as SARIF, keeping only the new findings."""

import json
import logging
from pathlib import Path

from prdiff.errors import OutputWriteError
from prdiff.models import Finding, Report

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILE = "snyk_code_pr_diff_scan.json"


def render_diff_report(report: Report, new_findings: list[Finding]) -> str:
    """Replace runs[0].results with ``new_findings`` and serialize the report.

    The report is modified in place; everything else in it is written back
    unchanged.
    """
    report["runs"][0]["results"] = new_findings
    try:
        return json.dumps(report, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise OutputWriteError(f"Failed to convert updated data to JSON: {exc}") from exc


def write_diff_report(report: Report, new_findings: list[Finding], path: str) -> Path:
    text_out = render_diff_report(report, new_findings)
    out = Path(path)
    try:
        out.write_text(text_out, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Failed to write updated data to file: {exc}") from exc
    logger.debug("Wrote %d finding(s) to %s", len(new_findings), out)
    return out
