"""Output format options for the variant listing.

Kept in the domain layer so the CLI and the presenters share a single
source of truth for the accepted `--output` values.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Supported renderings of the sorted variant list."""

    TEXT = "text"
    TABLE = "table"
    JSON = "json"

    @classmethod
    def default(cls) -> "OutputFormat":
        """Return the format used when `--output` is not given."""

        return cls.TEXT
