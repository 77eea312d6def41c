"""Collaborator interface for prior attempts, plus an in-memory implementation."""

from __future__ import annotations

import logging
from typing import Protocol

from quiz_player.core.models import CompletionRecord

logger = logging.getLogger(__name__)


class AttemptHistory(Protocol):
    """Read access for the session, write access for whoever stores records."""

    def get_attempts_for_quiz(self, quiz_id: str) -> list[CompletionRecord]: ...

    def save_attempt(self, record: CompletionRecord) -> None: ...


class InMemoryAttemptHistory:
    """Keeps completion records for the lifetime of the process, newest first."""

    def __init__(self) -> None:
        self._attempts: list[CompletionRecord] = []

    def save_attempt(self, record: CompletionRecord) -> None:
        self._attempts.insert(0, record)
        logger.info(
            "Stored attempt for quiz %s: %s/%s (%s%%)",
            record.quiz_id,
            record.score,
            record.total_questions,
            record.percentage,
        )

    def get_attempts_for_quiz(self, quiz_id: str) -> list[CompletionRecord]:
        return [attempt for attempt in self._attempts if attempt.quiz_id == quiz_id]

    def get_recent_attempts(self, limit: int = 10) -> list[CompletionRecord]:
        return list(self._attempts[:limit])

    def best_percentage(self, quiz_id: str) -> int | None:
        attempts = self.get_attempts_for_quiz(quiz_id)
        if not attempts:
            return None
        return max(attempt.percentage for attempt in attempts)

    def clear_attempts_for_quiz(self, quiz_id: str) -> None:
        self._attempts = [attempt for attempt in self._attempts if attempt.quiz_id != quiz_id]
