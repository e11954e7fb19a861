"""Helpers shared by CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from clarify.generator import GeneratorConfig, QuestionGenerator
from clarify.model import AnalysisResult, QuestionSet, StakeholderRole

ROLE_CHOICE = click.Choice([r.value for r in StakeholderRole])


def load_question_set(
    analysis_file: str, role: str, max_core: int, max_follow_ups: int
) -> QuestionSet:
    """Read an analysis JSON file and generate the question set for *role*."""
    try:
        data = json.loads(Path(analysis_file).read_text(encoding="utf-8"))
        analysis = AnalysisResult.from_dict(data)
    except (json.JSONDecodeError, KeyError, ValueError) as exc:
        click.echo(f"Invalid analysis file: {exc}", err=True)
        sys.exit(1)

    config = GeneratorConfig(max_core_questions=max_core, max_follow_up_questions=max_follow_ups)
    return QuestionGenerator(config).generate(analysis, StakeholderRole(role))


def load_answers(answers_file: str) -> dict[str, str]:
    """Read an answers file: a JSON object of question id (or text) to answer text."""
    try:
        data = json.loads(Path(answers_file).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid answers file: {exc}", err=True)
        sys.exit(1)

    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        click.echo("Invalid answers file: expected an object of question id to answer text", err=True)
        sys.exit(1)
    return data
