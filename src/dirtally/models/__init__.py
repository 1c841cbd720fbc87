"""dirtally data models."""

from dirtally.models.entry import TOTAL_LABEL, Entry, Marker

__all__ = [
    "Entry",
    "Marker",
    "TOTAL_LABEL",
]
