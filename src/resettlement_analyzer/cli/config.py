"""CLI configuration from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from resettlement_analyzer.reporting.report_generator import TEMPLATES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CliConfig:
    """Settings for the ``resettle`` command line tool."""

    # Report language: zh or en
    locale: str = "zh"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> CliConfig:
        """Load configuration from environment variables."""
        return cls(
            locale=os.environ.get("RESETTLE_LOCALE", "zh"),
            log_level=os.environ.get("RESETTLE_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if config is valid."""
        errors = []
        if self.locale not in TEMPLATES:
            errors.append(
                f"Unsupported locale: {self.locale} (expected one of {', '.join(TEMPLATES)})"
            )
        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unsupported log level: {self.log_level}")
        return errors
