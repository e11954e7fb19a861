"""CLI command: clarify questions -- print the generated question set."""

from __future__ import annotations

import json

import click

from clarify.cli.common import ROLE_CHOICE, load_question_set


@click.command()
@click.argument("analysis_file", type=click.Path(exists=True))
@click.option("--role", type=ROLE_CHOICE, default="tech-lead", help="Stakeholder role")
@click.option("--max-core", default=8, type=int, help="Maximum core questions")
@click.option("--max-follow-ups", default=8, type=int, help="Maximum follow-up questions")
def questions(analysis_file: str, role: str, max_core: int, max_follow_ups: int) -> None:
    """Generate interview questions from an analysis JSON file."""
    question_set = load_question_set(analysis_file, role, max_core, max_follow_ups)
    click.echo(json.dumps(question_set.to_dict(), indent=2))
