"""Baseline/diff mode — find PR findings whose fingerprints are not in the baseline."""

import logging
from collections.abc import Iterable, Sequence

from prdiff.models import DiffResult, Finding

logger = logging.getLogger(__name__)

IGNORED_KEYS = frozenset({"identity"})


def fingerprint_set(finding: Finding) -> dict | None:
    """Return a filtered copy of the finding's fingerprints, or None if it has none.

    The volatile ``identity`` key is dropped; the input finding
    is left untouched.
    """
    if not isinstance(finding, dict):
        return None
    fingerprints = finding.get("fingerprints")
    if not isinstance(fingerprints, dict):
        return None
    return {k: v for k, v in fingerprints.items() if k not in IGNORED_KEYS}


def find_new_fingerprint_indices(
    baseline_results: Sequence[Finding],
    pr_results: Sequence[Finding],
) -> list[int]:
    """Return the positions of PR findings that match no baseline finding.

    PR findings without fingerprints are never reported as new.
    """
    baseline_fps = [
        fp for fp in (fingerprint_set(f) for f in baseline_results)
        if fp is not None
    ]

    new_indices = []
    for i, pr_finding in enumerate(pr_results):
        pr_fp = fingerprint_set(pr_finding)
        if pr_fp is None:
            logger.debug("PR result %d has no fingerprints, skipping", i)
            continue
        if not any(pr_fp == base_fp for base_fp in baseline_fps):
            new_indices.append(i)
    return new_indices


def extract_new_issues(results: Sequence[Finding], indices: Iterable[int]) -> list[Finding]:
    """Return the findings at ``indices``, in the order the indices are given."""
    return [results[idx] for idx in indices]


def compute_diff(
    baseline_results: Sequence[Finding],
    pr_results: Sequence[Finding],
) -> DiffResult:
    """Classify every PR finding as new, unchanged or unfingerprinted."""
    new_indices = find_new_fingerprint_indices(baseline_results, pr_results)
    new_set = set(new_indices)

    unchanged = []
    unfingerprinted = 0
    for i, finding in enumerate(pr_results):
        if i in new_set:
            continue
        if fingerprint_set(finding) is None:
            unfingerprinted += 1
        else:
            unchanged.append(finding)

    logger.debug(
        "Diff: %d new, %d unchanged, %d without fingerprints",
        len(new_indices), len(unchanged), unfingerprinted,
    )
    return DiffResult(
        new_indices=new_indices,
        new_findings=extract_new_issues(pr_results, new_indices),
        unchanged_findings=unchanged,
        unfingerprinted=unfingerprinted,
    )


def has_new_findings(diff: DiffResult) -> bool:
    return bool(diff.new_findings)
