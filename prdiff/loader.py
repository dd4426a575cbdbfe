"""Load scan reports from disk and locate their findings."""

import json
import logging
from pathlib import Path

from prdiff.errors import ReportParseError, ReportReadError, ResultsNotFoundError
from prdiff.models import Finding, Report

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # json accepts NaN and Infinity by default; strict JSON does not.
    raise ValueError(f"invalid JSON constant {name!r}")


def load_report(path: str, which: str = "report") -> Report:
    """Read and decode a JSON scan report.

    ``which`` names the scan ("Baseline", "PR") in error messages.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportReadError(f"Failed to read the {which} JSON file: {exc}") from exc

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ReportParseError(f"Failed to parse the {which} JSON scan: {exc}") from exc

    if not isinstance(data, dict):
        raise ReportParseError(
            f"Failed to parse the {which} JSON scan: expected an object, got {type(data).__name__}"
        )

    logger.debug("Loaded %s scan from %s", which, path)
    return data


def extract_results(report: Report) -> tuple[list[Finding], bool]:
    """Return (runs[0].results, True), or ([], False) if the path is absent."""
    runs = report.get("runs")
    if not isinstance(runs, list) or not runs:
        return [], False

    first_run = runs[0]
    if not isinstance(first_run, dict):
        return [], False

    results = first_run.get("results")
    if not isinstance(results, list):
        return [], False
    return results, True


def require_results(report: Report, scan: str) -> list[Finding]:
    """Like extract_results, but a missing results list is fatal.

    ``scan`` completes the message "from <scan> scan", e.g. "the Baseline".
    """
    results, found = extract_results(report)
    if not found:
        raise ResultsNotFoundError(f"Failed to extract 'results' from {scan} scan")
    logger.debug("%s scan has %d result(s)", scan, len(results))
    return results
