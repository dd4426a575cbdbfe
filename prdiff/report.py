"""Console reporting of new findings with rich."""

from __future__ import annotations

import math
from typing import Any

from rich.console import Console
from rich.markup import escape

from prdiff.errors import MalformedFindingError
from prdiff.models import Finding, IssueSummary

SEVERITY_COLORS = {
    "High": "red",
    "Medium": "yellow",
    "Low": "cyan",
}


def _console() -> Console:
    # Finding text is printed verbatim: no wrapping, emoji codes or highlighting.
    return Console(highlight=False, emoji=False, soft_wrap=True)


def _require(value: Any, key: str | int, expected: type | tuple[type, ...], path: str) -> Any:
    if isinstance(key, int):
        if not isinstance(value, list) or len(value) <= key:
            raise MalformedFindingError(path)
        item = value[key]
    else:
        if not isinstance(value, dict) or key not in value:
            raise MalformedFindingError(path)
        item = value[key]
    if not isinstance(item, expected) or isinstance(item, bool):
        raise MalformedFindingError(path)
    return item


def extract_issue_data(finding: Finding) -> IssueSummary:
    """Pull level, message, file URI and start line out of a finding.

    Unlike result extraction this is strict: any missing or mistyped field
    raises MalformedFindingError.
    """
    level = _require(finding, "level", str, "level")
    message = _require(finding, "message", dict, "message")
    text = _require(message, "text", str, "message.text")

    locations = _require(finding, "locations", list, "locations")
    location = _require(locations, 0, dict, "locations[0]")
    physical = _require(location, "physicalLocation", dict, "locations[0].physicalLocation")
    artifact = _require(
        physical, "artifactLocation", dict, "locations[0].physicalLocation.artifactLocation"
    )
    uri = _require(artifact, "uri", str, "locations[0].physicalLocation.artifactLocation.uri")
    region = _require(physical, "region", dict, "locations[0].physicalLocation.region")
    start_line = _require(
        region, "startLine", (int, float), "locations[0].physicalLocation.region.startLine"
    )
    if not math.isfinite(start_line):
        raise MalformedFindingError(
            "locations[0].physicalLocation.region.startLine", "not a finite number"
        )

    return IssueSummary(level=level, message=text, uri=uri, start_line=int(start_line))


def render_banner() -> None:
    console = _console()
    console.print()
    console.print("[bold]Running Snyk Code PR Diff[/]")


def render_new_issues(issues: list[IssueSummary]) -> None:
    console = _console()
    for issue in issues:
        severity = issue.severity
        color = SEVERITY_COLORS.get(severity, "bold")
        console.print(f"[{color}]✗ Severity: {escape(f'[{severity}]')}[/]")
        console.print(f"Path: {escape(issue.uri)}")
        console.print(f"Start Line: {issue.start_line}")
        console.print(f"Message: {escape(issue.message)}")
        console.print()


def render_summary(issue_count: int) -> None:
    console = _console()
    console.print()
    if issue_count > 0:
        console.print(f"[bold red]Total issues found: {issue_count}[/]")
    else:
        console.print("[bold green]No issues found![/]")


def render_saved(output_path: str) -> None:
    console = _console()
    console.print()
    console.print(f"Results saved in {escape(output_path)}")
