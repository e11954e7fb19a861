"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for an interview session."""

    max_follow_ups: int = 8  # distinct follow-up ids asked per session
