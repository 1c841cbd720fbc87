"""CLI interface for dirtally."""

from __future__ import annotations

import logging
import os

import click

from dirtally.core.aggregator import ErrorPolicy
from dirtally.core.report import build_report
from dirtally.display import print_report
from dirtally.settings import Settings


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--strict", is_flag=True, help="Fail on unreadable entries instead of skipping them")
def main(verbose: int, strict: bool) -> None:
    """Show the disk usage of everything in the current directory."""
    _setup_logging(verbose)
    settings = Settings()
    policy = ErrorPolicy.RAISE if strict else settings.error_policy()

    try:
        cwd = os.getcwd()
        entries = build_report(cwd, policy)
    except OSError as e:
        raise click.ClickException(str(e)) from e

    print_report(entries, glyphs=settings.glyphs())
