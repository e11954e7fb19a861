"""Snapshot model: serialisable interview progress for resume support."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from clarify.model.category import StakeholderRole
from clarify.model.exchange import InterviewExchange
from clarify.model.state import SessionState


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time projection of an interview session.

    Queued questions are stored by id only; a snapshot is meaningful only
    when restored into a session bound to the question set it came from.
    """

    role: StakeholderRole
    state: SessionState
    exchanges: tuple[InterviewExchange, ...] = ()
    question_index: int = 0
    asked_follow_up_ids: tuple[str, ...] = ()
    remaining_core_question_ids: tuple[str, ...] = ()
    remaining_follow_up_ids: tuple[str, ...] = ()
    started_at: datetime | None = None
    completed_at: datetime | None = None

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "state": self.state.value,
            "exchanges": [e.to_dict() for e in self.exchanges],
            "question_index": self.question_index,
            "asked_follow_up_ids": list(self.asked_follow_up_ids),
            "remaining_core_question_ids": list(self.remaining_core_question_ids),
            "remaining_follow_up_ids": list(self.remaining_follow_up_ids),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionSnapshot:
        return cls(
            role=StakeholderRole(data["role"]),
            state=SessionState(data["state"]),
            exchanges=tuple(InterviewExchange.from_dict(e) for e in data.get("exchanges", [])),
            question_index=data.get("question_index", 0),
            asked_follow_up_ids=tuple(data.get("asked_follow_up_ids", [])),
            remaining_core_question_ids=tuple(data.get("remaining_core_question_ids", [])),
            remaining_follow_up_ids=tuple(data.get("remaining_follow_up_ids", [])),
            started_at=_parse_time(data.get("started_at")),
            completed_at=_parse_time(data.get("completed_at")),
        )

    # --- persistence ----------------------------------------------------------

    def save(self, path: Path) -> None:
        """Serialise to JSON and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> SessionSnapshot:
        """Deserialise a snapshot from a JSON file at *path*."""
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)
