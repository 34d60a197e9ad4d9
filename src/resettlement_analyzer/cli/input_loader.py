"""Reading JSON input documents for CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from resettlement_analyzer.cli.config import CliConfig


def load_json(source: str) -> Any:
    """Load a JSON document from a file path, or stdin when ``source`` is '-'.

    Raises OSError for unreadable files and ValueError for invalid JSON.
    """
    if source == "-":
        return json.loads(sys.stdin.read())

    path = Path(source)
    if not path.is_file():
        raise OSError(f"File not found: {source}")
    with path.open("r", encoding="utf-8-sig") as f:
        return json.load(f)


def resolve_locale(locale: str = "") -> str:
    """Pick the report locale: explicit option, else RESETTLE_LOCALE, else zh.

    Raises ValueError for a locale without report templates.
    """
    config = CliConfig.from_env()
    if locale:
        config.locale = locale
    errors = [e for e in config.validate() if e.startswith("Unsupported locale")]
    if errors:
        raise ValueError(errors[0])
    return config.locale
