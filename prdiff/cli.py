"""Click-based CLI interface for prdiff."""

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from prdiff.baseline import compute_diff, has_new_findings
from prdiff.config import Config, load_config
from prdiff.errors import PRDiffError
from prdiff.formatters.sarif import write_diff_report
from prdiff.loader import load_report, require_results
from prdiff.models import DiffResult
from prdiff.report import (
    extract_issue_data,
    render_banner,
    render_new_issues,
    render_saved,
    render_summary,
)

EXIT_NEW_ISSUES = 1
EXIT_FATAL = 2

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Send prdiff log records to stderr through rich."""
    pkg_logger = logging.getLogger("prdiff")
    pkg_logger.handlers.clear()
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def run_diff(baseline_path: str, pr_path: str, config: Config | None = None) -> tuple[DiffResult, str | None]:
    """Run the whole comparison and return (diff, written report path).

    Raises PRDiffError on any fatal condition instead of exiting, so the
    caller decides the exit code. The report path is None when there are
    no new issues and nothing was written.
    """
    config = config or Config()
    logger.debug("Comparing %s against baseline %s", pr_path, baseline_path)

    baseline_data = load_report(baseline_path, "Baseline")
    pr_data = load_report(pr_path, "PR")

    render_banner()

    baseline_results = require_results(baseline_data, "the Baseline")
    pr_results = require_results(pr_data, "PR")

    diff = compute_diff(baseline_results, pr_results)

    render_new_issues([extract_issue_data(f) for f in diff.new_findings])
    render_summary(len(diff.new_findings))

    if not has_new_findings(diff):
        return diff, None

    out = write_diff_report(pr_data, diff.new_findings, config.output_file)
    render_saved(str(out))
    return diff, str(out)


@click.command()
@click.version_option(package_name="prdiff")
@click.argument("baseline_file", type=click.Path(dir_okay=False))
@click.argument("pr_file", type=click.Path(dir_okay=False))
@click.option("--output", "-o", type=str, default=None,
              help="Where to write the PR scan filtered to new findings.")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Path to a YAML file setting output_file.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr.")
def cli(baseline_file, pr_file, output, config_path, verbose):
    """Report findings in PR_FILE that are not in BASELINE_FILE.

    Exits 1 when new findings exist and writes them to a SARIF file.
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path)
    except (OSError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_FATAL)
    if output:
        config.output_file = output

    try:
        diff, _ = run_diff(os.path.normpath(baseline_file), os.path.normpath(pr_file), config)
    except PRDiffError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_FATAL)

    if has_new_findings(diff):
        sys.exit(EXIT_NEW_ISSUES)
