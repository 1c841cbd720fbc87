"""Disk usage report for the immediate children of a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dirtally.core.aggregator import ErrorPolicy, aggregate
from dirtally.models.entry import Entry, Marker

log = logging.getLogger(__name__)


class ReportError(OSError):
    """Raised when the target directory cannot be listed."""


def build_report(directory: Path | str, policy: ErrorPolicy = ErrorPolicy.SKIP) -> list[Entry]:
    """Build the sorted list of report entries for *directory*.

    Every immediate child that is a regular file or a directory gets one
    entry; directories are sized recursively with :func:`aggregate`.
    Children that are neither, or whose metadata cannot be read, are left
    out of both the list and the total.  A synthetic ``Total`` entry is
    appended and the list is stably sorted ascending by size.

    Raises:
        ReportError: If *directory* itself cannot be opened.
        OSError: Under ``ErrorPolicy.RAISE``, for any unreadable child.
    """
    entries: list[Entry] = []
    total = 0

    try:
        with os.scandir(directory) as it:
            children = list(it)
    except OSError as e:
        raise ReportError(e.errno, e.strerror, os.fspath(directory)) from e

    for child in children:
        try:
            if child.is_dir(follow_symlinks=False):
                size = aggregate(child.path, policy)
                marker = Marker.DIRECTORY
            elif child.is_file(follow_symlinks=False):
                size = child.stat(follow_symlinks=False).st_size
                marker = Marker.FILE
            else:
                log.debug("Skipping %s: not a regular file or directory", child.path)
                continue
        except OSError as e:
            if policy is ErrorPolicy.RAISE:
                raise
            log.debug("Skipping %s: %s", child.path, e)
            continue

        total += size
        entries.append(Entry(size=size, name=child.name, marker=marker))

    entries.append(Entry.total(total))
    entries.sort(key=lambda e: e.size)

    log.info("Scanned %s: %d entries, %d bytes", directory, len(entries) - 1, total)
    return entries
