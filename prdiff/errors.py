"""Error taxonomy for prdiff. Every fatal condition is a PRDiffError."""


class PRDiffError(Exception):
    """Base class for errors that abort a diff run."""


class ReportReadError(PRDiffError):
    """A report file could not be opened or read."""


class ReportParseError(PRDiffError):
    """A report file is not a valid JSON document."""


class ResultsNotFoundError(PRDiffError):
    """A report has no runs[0].results list."""


class MalformedFindingError(PRDiffError):
    """A finding is missing a field needed for console output."""

    def __init__(self, field_path: str, reason: str = "missing or of the wrong type"):
        self.field_path = field_path
        super().__init__(f"Malformed finding: '{field_path}' is {reason}")


class OutputWriteError(PRDiffError):
    """The filtered diff report could not be serialized or written."""
