"""Tests for the clarify CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from clarify.cli.main import cli
from clarify.model import SessionSnapshot, SessionState, StakeholderRole


@pytest.fixture
def analysis_file(tmp_path):
    path = tmp_path / "analysis.json"
    path.write_text(
        json.dumps(
            {
                "decisions": [
                    {"title": "Auth flow", "category": "security", "clarityScore": 0.2},
                    {"title": "Logging", "category": "library", "clarityScore": 0.9},
                ],
                "ambiguities": [{"description": "Data ownership"}],
                "summary": "Two decisions, one open question",
            }
        )
    )
    return str(path)


def _answers_file(tmp_path, answers: dict[str, str]) -> str:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(answers))
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "stakeholder interviews" in result.output

    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert "questions" in result.output
        assert "interview" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# questions command
# ---------------------------------------------------------------------------


class TestQuestionsCommand:
    def test_prints_question_set_json(self, analysis_file) -> None:
        result = CliRunner().invoke(cli, ["questions", analysis_file])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["role"] == "tech-lead"
        assert data["core_questions"][0]["id"] == "decision-1"
        assert "Auth flow" in data["core_questions"][0]["text"]
        assert data["follow_up_questions"]

    def test_role_option(self, analysis_file) -> None:
        result = CliRunner().invoke(cli, ["questions", analysis_file, "--role", "qa"])
        data = json.loads(result.output)
        assert data["role"] == "qa"
        assert all(q["id"].startswith(("decision-", "ambiguity-", "qa-")) for q in data["core_questions"])

    def test_max_core(self, analysis_file) -> None:
        result = CliRunner().invoke(cli, ["questions", analysis_file, "--max-core", "2"])
        data = json.loads(result.output)
        assert len(data["core_questions"]) == 2

    def test_unknown_role_rejected(self, analysis_file) -> None:
        result = CliRunner().invoke(cli, ["questions", analysis_file, "--role", "ceo"])
        assert result.exit_code != 0

    def test_invalid_analysis_file(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        result = CliRunner().invoke(cli, ["questions", str(path)])
        assert result.exit_code == 1
        assert "Invalid analysis file" in result.output

    def test_verbose_flag(self, analysis_file) -> None:
        result = CliRunner().invoke(cli, ["-v", "questions", analysis_file])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# interview command
# ---------------------------------------------------------------------------


class TestInterviewCommand:
    def test_unattended_interview_completes(self, analysis_file, tmp_path) -> None:
        answers = _answers_file(tmp_path, {"decision-1": "OAuth with PKCE"})
        result = CliRunner().invoke(
            cli, ["interview", analysis_file, "--answers", answers, "--default", "fine"]
        )

        assert result.exit_code == 0
        assert "State: completed" in result.output
        assert "A: OAuth with PKCE" in result.output
        assert "[+follow-up]" in result.output

    def test_missing_answer_cancels(self, analysis_file, tmp_path) -> None:
        answers = _answers_file(tmp_path, {"decision-1": "OAuth with PKCE"})
        result = CliRunner().invoke(cli, ["interview", analysis_file, "--answers", answers])

        assert result.exit_code == 1
        assert "State: cancelled" in result.output
        assert "Exchanges (1):" in result.output

    def test_empty_answer_shown_as_skipped(self, analysis_file, tmp_path) -> None:
        answers = _answers_file(tmp_path, {})
        result = CliRunner().invoke(
            cli, ["interview", analysis_file, "--answers", answers, "--default", ""]
        )
        assert result.exit_code == 0
        assert "(skipped)" in result.output

    def test_writes_snapshot(self, analysis_file, tmp_path) -> None:
        answers = _answers_file(tmp_path, {})
        snapshot_path = tmp_path / "out" / "snapshot.json"
        result = CliRunner().invoke(
            cli,
            [
                "interview", analysis_file,
                "--answers", answers,
                "--default", "ok",
                "--snapshot", str(snapshot_path),
            ],
        )

        assert result.exit_code == 0
        assert "Snapshot written" in result.output
        snapshot = SessionSnapshot.load(snapshot_path)
        assert snapshot.state is SessionState.COMPLETED
        assert snapshot.remaining_core_question_ids == ()

    def test_resume_from_snapshot(self, analysis_file, tmp_path) -> None:
        snapshot_path = tmp_path / "snapshot.json"
        SessionSnapshot(
            role=StakeholderRole.TECH_LEAD,
            state=SessionState.IN_PROGRESS,
            remaining_core_question_ids=("decision-1",),
        ).save(snapshot_path)
        answers = _answers_file(tmp_path, {})

        result = CliRunner().invoke(
            cli,
            [
                "interview", analysis_file,
                "--answers", answers,
                "--default", "ok",
                "--resume", str(snapshot_path),
            ],
        )

        assert result.exit_code == 0
        assert "Resuming from snapshot" in result.output
        assert "Auth flow" in result.output
        assert "Data ownership" not in result.output

    def test_malformed_answers_file(self, analysis_file, tmp_path) -> None:
        path = tmp_path / "answers.json"
        path.write_text("{oops")

        result = CliRunner().invoke(cli, ["interview", analysis_file, "--answers", str(path)])

        assert result.exit_code == 1
        assert "Invalid answers file" in result.output

    def test_non_string_answers_rejected(self, analysis_file, tmp_path) -> None:
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"decision-1": 42}))

        result = CliRunner().invoke(cli, ["interview", analysis_file, "--answers", str(path)])

        assert result.exit_code == 1
        assert "Invalid answers file" in result.output
        assert "Traceback" not in result.output

    def test_resume_with_other_role_fails(self, analysis_file, tmp_path) -> None:
        snapshot_path = tmp_path / "snapshot.json"
        SessionSnapshot(role=StakeholderRole.UX, state=SessionState.READY).save(snapshot_path)
        answers = _answers_file(tmp_path, {})

        result = CliRunner().invoke(
            cli,
            [
                "interview", analysis_file,
                "--answers", answers,
                "--resume", str(snapshot_path),
            ],
        )

        assert result.exit_code == 1
        assert "Interview failed" in result.output

    def test_interactive_end_of_input_cancels(self, analysis_file) -> None:
        result = CliRunner().invoke(cli, ["interview", analysis_file], input="")

        assert result.exit_code == 1
        assert "State: cancelled" in result.output

    def test_interactive_answers(self, analysis_file) -> None:
        result = CliRunner().invoke(
            cli,
            ["interview", analysis_file, "--max-core", "1", "--max-follow-ups", "0"],
            input="We use OAuth\n",
        )

        assert result.exit_code == 0
        assert "Auth flow" in result.output
        assert "Progress:" in result.output
        assert "100% (1/1)" in result.output
        assert "A: We use OAuth" in result.output
        assert "State: completed" in result.output
