"""Building blocks for job summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ENV_VAR = "GITHUB_STEP_SUMMARY"


@dataclass(frozen=True)
class TableCell:
    """A cell of a summary table."""

    data: str = ""
    header: bool = False
    colspan: int = 1
    rowspan: int = 1

    @classmethod
    def header_cell(cls, data: str) -> TableCell:
        """Create a cell rendered as a header."""
        return cls(data=data, header=True)


@dataclass(frozen=True)
class ImageOptions:
    """Size of an image in pixels."""

    width: Optional[int] = None
    height: Optional[int] = None