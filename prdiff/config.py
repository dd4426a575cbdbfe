"""Optional YAML settings for prdiff, read only from an explicit --config path."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from prdiff.formatters.sarif import DEFAULT_OUTPUT_FILE


@dataclass
class Config:
    output_file: str = DEFAULT_OUTPUT_FILE


def load_config(config_path: str | None = None) -> Config:
    """Return defaults, or the settings in ``config_path`` when one is given.

    Only ``output_file`` is recognised; other keys are ignored.
    """
    if not config_path:
        return Config()

    path = Path(config_path)
    try:
        text = path.read_text()
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Config file not found: {config_path}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must be a YAML mapping, got {type(raw).__name__}")

    output_file = raw.get("output_file", DEFAULT_OUTPUT_FILE)
    if not isinstance(output_file, str) or not output_file:
        raise ValueError("output_file must be a non-empty string")
    return Config(output_file=output_file)
