"""CLI command: clarify interview -- run an interview session."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from clarify.answers import ConsoleAdapter, MapAnswerProvider
from clarify.cli.common import ROLE_CHOICE, load_answers, load_question_set
from clarify.events import FollowUpTriggered, QuestionAsked
from clarify.model import SessionSnapshot, SessionState
from clarify.session import InterviewError, InterviewSession, SessionConfig


@click.command()
@click.argument("analysis_file", type=click.Path(exists=True))
@click.option("--role", type=ROLE_CHOICE, default="tech-lead", help="Stakeholder role")
@click.option(
    "--answers",
    "answers_file",
    type=click.Path(exists=True),
    default=None,
    help="JSON object of question id to answer; runs unattended",
)
@click.option("--default", "default_answer", default=None, help="Answer for unmapped questions")
@click.option("--max-core", default=8, type=int, help="Maximum core questions")
@click.option("--max-follow-ups", default=8, type=int, help="Maximum follow-ups asked")
@click.option("--snapshot", "snapshot_path", default=None, help="Write a snapshot here when done")
@click.option(
    "--resume",
    type=click.Path(exists=True),
    default=None,
    help="Resume from a snapshot file",
)
def interview(
    analysis_file: str,
    role: str,
    answers_file: str | None,
    default_answer: str | None,
    max_core: int,
    max_follow_ups: int,
    snapshot_path: str | None,
    resume: str | None,
) -> None:
    """Run an interview for ANALYSIS_FILE, interactively or from an answers file."""
    question_set = load_question_set(analysis_file, role, max_core, max_follow_ups)
    config = SessionConfig(max_follow_ups=max_follow_ups)

    if answers_file:
        answers = load_answers(answers_file)
        session = InterviewSession(
            question_set,
            provider=MapAnswerProvider(answers, default=default_answer),
            config=config,
        )
    else:
        adapter = ConsoleAdapter()
        adapter.display_header(f"{role} interview")
        adapter.display("Type 'skip' to pass on a question, Ctrl-D to stop.")
        session = InterviewSession(question_set, adapter=adapter, config=config)
        session.event_bus.subscribe(
            FollowUpTriggered,
            lambda event: adapter.display(click.style("  follow-up queued", dim=True)),
        )

        def show_progress(event: QuestionAsked) -> None:
            asked = len(session.get_exchanges()) + 1
            adapter.display_progress(asked, asked + event.questions_remaining)

        session.event_bus.subscribe(QuestionAsked, show_progress)

    try:
        if resume:
            session.restore_from_snapshot(SessionSnapshot.load(Path(resume)))
            click.echo(f"Resuming from snapshot: {resume}")
        if session.get_state() is SessionState.READY:
            session.start()
    except (InterviewError, ValueError) as exc:
        click.echo(f"Interview failed: {exc}", err=True)
        sys.exit(1)

    if snapshot_path:
        session.create_snapshot().save(Path(snapshot_path))
        click.echo(f"Snapshot written: {snapshot_path}")

    exchanges = session.get_exchanges()
    click.echo(f"\nState: {session.get_state().value}")
    click.echo(f"Exchanges ({len(exchanges)}):")
    for exchange in exchanges:
        marker = " [+follow-up]" if exchange.follow_up_triggered else ""
        click.echo(f"  Q: {exchange.question}{marker}")
        click.echo(f"  A: {exchange.answer or '(skipped)'}")

    sys.exit(0 if session.get_state() is SessionState.COMPLETED else 1)
