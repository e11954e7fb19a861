"""Clarify CLI entry point: Click group with subcommands."""

import logging

import click

from clarify import __version__


@click.group()
@click.version_option(version=__version__, prog_name="clarify")
@click.option("--verbose", "-v", is_flag=True, help="Log session progress to stderr")
def cli(verbose: bool) -> None:
    """Clarify - stakeholder interviews generated from spec analysis."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from clarify.cli.questions import questions  # noqa: E402
from clarify.cli.interview import interview  # noqa: E402

cli.add_command(questions)
cli.add_command(interview)
