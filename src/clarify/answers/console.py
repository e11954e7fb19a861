"""ConsoleAdapter: prompts a human at the terminal."""

from __future__ import annotations

import math
import signal
from typing import Any

import click

from clarify.model.answer import Answer, Answered, Cancelled
from clarify.model.question import InterviewQuestion

SKIP_TOKEN = "skip"


class ConsoleAdapter:
    """Interactive adapter that uses click for terminal prompts.

    Shows the question with its category and follow-up badge, then reads a
    free-text answer. Typing ``skip`` answers with an empty string; EOF,
    Ctrl-C or an elapsed timeout cancels the interview. The timeout relies
    on SIGALRM and therefore only works on POSIX.
    """

    def __init__(
        self,
        *,
        question_prefix: str = "?",
        prompt_label: str = "Your answer",
        show_metadata: bool = True,
        timeout_seconds: float | None = None,
    ) -> None:
        self.question_prefix = question_prefix
        self.prompt_label = prompt_label
        self.show_metadata = show_metadata
        self.timeout_seconds = timeout_seconds

    def prompt(self, question: InterviewQuestion) -> Answer:
        click.echo()
        if self.show_metadata:
            badge = click.style(f"[{question.category.value}]", dim=True)
            if question.is_follow_up:
                badge += " " + click.style("(follow-up)", fg="yellow")
            click.echo(badge)
        click.echo(f"{self.question_prefix} " + click.style(question.text, fg="cyan"))
        click.echo()

        raw = self._read(self.timeout_seconds)
        if raw is None:
            return Cancelled(reason="No answer from console")
        if raw.strip().lower() == SKIP_TOKEN:
            return Answered("")
        return Answered(raw)

    def display(self, message: str) -> None:
        click.echo(message)

    def display_header(self, title: str) -> None:
        line = "-" * 50
        click.echo(click.style(line, dim=True))
        click.echo(click.style(title, bold=True))
        click.echo(click.style(line, dim=True))

    def display_progress(self, current: int, total: int) -> None:
        percentage = round(current / total * 100) if total else 100
        filled = round(percentage / 5)
        bar = "#" * filled + "." * (20 - filled)
        click.echo(click.style(f"Progress: [{bar}] {percentage}% ({current}/{total})", dim=True))

    def _read(self, timeout: float | None) -> str | None:
        """Read one answer. Returns None on EOF, interrupt or timeout."""
        if timeout is None or timeout <= 0:
            return self._ask()

        def _handler(signum: Any, frame: Any) -> None:
            raise TimeoutError

        old_handler = signal.signal(signal.SIGALRM, _handler)
        try:
            # alarm() takes whole seconds and treats 0 as "no alarm"
            signal.alarm(math.ceil(timeout))
            return self._ask()
        except TimeoutError:
            return None
        finally:
            signal.alarm(0)
            signal.signal(signal.SIGALRM, old_handler)

    def _ask(self) -> str | None:
        # click re-prompts on empty input; "skip" is the way to pass
        try:
            return click.prompt(self.prompt_label, type=str)
        except click.Abort:
            return None
