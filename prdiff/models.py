"""Data models for scan reports, findings and diff results."""

from dataclasses import dataclass, field
from typing import Any

# Reports and findings stay as decoded JSON trees so that the filtered
# report can be written back without losing fields we don't model.
Report = dict[str, Any]
Finding = dict[str, Any]

SEVERITY_REPLACEMENTS = (
    ("note", "Low"),
    ("warning", "Medium"),
    ("error", "High"),
)


def map_severity(level: str) -> str:
    """Map a SARIF level to a display severity.

    Literal substring replacement of the first occurrence, applied in order,
    so "warning" becomes "Medium" and unknown levels pass through unchanged.
    """
    for old, new in SEVERITY_REPLACEMENTS:
        level = level.replace(old, new, 1)
    return level


@dataclass(frozen=True)
class IssueSummary:
    level: str
    message: str
    uri: str
    start_line: int

    @property
    def severity(self) -> str:
        return map_severity(self.level)


@dataclass
class DiffResult:
    new_indices: list[int] = field(default_factory=list)
    new_findings: list[Finding] = field(default_factory=list)
    unchanged_findings: list[Finding] = field(default_factory=list)
    unfingerprinted: int = 0
