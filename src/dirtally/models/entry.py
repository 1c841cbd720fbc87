"""Report entry dataclass."""

from __future__ import annotations

import enum
from dataclasses import dataclass

TOTAL_LABEL = "Total"


class Marker(enum.Enum):
    """Presentation tag for a report row."""

    DIRECTORY = "directory"
    FILE = "file"
    TOTAL = "total"


@dataclass(slots=True)
class Entry:
    """Single row of a disk usage report.

    Regular rows describe one immediate child of the scanned directory.
    The synthetic total row carries ``Marker.TOTAL`` and the label
    ``"Total"``.
    """

    size: int
    name: str
    marker: Marker

    @property
    def is_total(self) -> bool:
        return self.marker is Marker.TOTAL

    @classmethod
    def total(cls, size: int) -> Entry:
        """Build the synthetic total row."""
        return cls(size=size, name=TOTAL_LABEL, marker=Marker.TOTAL)
