from __future__ import annotations

import asyncio
import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence
from uuid import uuid4

from .schemas import (
    CrisisAssessment,
    Severity,
    StatsResponse,
    Submission,
    SubmissionTag,
    TagCount,
)

logger = logging.getLogger(__name__)


class SubmissionNotFoundError(KeyError):
    """Raised when the requested submission id is unknown or expired."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmissionStore:
    """In-memory, expiring submission log suitable for demos.

    Records older than ``retention_days`` are treated as gone: they are
    filtered out on read and purged before every write.
    """

    def __init__(
        self,
        retention_days: int = 30,
        min_length: int = 10,
        max_length: int = 2000,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._submissions: Dict[str, Dict[str, Any]] = {}
        self._lock = asyncio.Lock()
        self._retention = timedelta(days=retention_days)
        self._min_length = min_length
        self._max_length = max_length
        self._clock = clock

    def _is_expired(self, payload: Dict[str, Any], now: datetime) -> bool:
        return now - payload["created_at"] > self._retention

    def _purge_locked(self, now: datetime) -> int:
        expired = [
            submission_id
            for submission_id, payload in self._submissions.items()
            if self._is_expired(payload, now)
        ]
        for submission_id in expired:
            del self._submissions[submission_id]
        return len(expired)

    def validate_content(self, content: str) -> str:
        cleaned = content.strip()
        if len(cleaned) < self._min_length:
            raise ValueError(
                f"Submission must be at least {self._min_length} characters."
            )
        if len(cleaned) > self._max_length:
            raise ValueError(
                f"Submission must be at most {self._max_length} characters."
            )
        return cleaned

    async def save(
        self,
        content: str,
        mood: int,
        tags: Sequence[SubmissionTag] = (),
        crisis_assessment: Optional[CrisisAssessment] = None,
    ) -> Submission:
        cleaned = self.validate_content(content)
        now = self._clock()
        payload = {
            "id": uuid4().hex,
            "content": cleaned,
            "mood": mood,
            "tags": list(tags),
            "created_at": now,
            "crisis_assessment": crisis_assessment,
        }
        async with self._lock:
            purged = self._purge_locked(now)
            self._submissions[payload["id"]] = payload
        if purged:
            logger.info("Purged %d expired submission(s) before save", purged)
        return Submission(**payload)

    async def list_submissions(self) -> List[Submission]:
        now = self._clock()
        async with self._lock:
            self._purge_locked(now)
            payloads = list(self._submissions.values())
        payloads.sort(key=lambda item: item["created_at"], reverse=True)
        return [Submission(**payload) for payload in payloads]

    async def get(self, submission_id: str) -> Submission:
        now = self._clock()
        async with self._lock:
            payload = self._submissions.get(submission_id)
            if payload is None or self._is_expired(payload, now):
                raise SubmissionNotFoundError(submission_id)
            return Submission(**payload)

    async def delete(self, submission_id: str) -> None:
        async with self._lock:
            if submission_id not in self._submissions:
                raise SubmissionNotFoundError(submission_id)
            del self._submissions[submission_id]

    async def delete_expired(self) -> int:
        async with self._lock:
            return self._purge_locked(self._clock())

    async def clear(self) -> int:
        async with self._lock:
            count = len(self._submissions)
            self._submissions.clear()
        return count

    async def stats(self, top_tags: int = 5) -> StatsResponse:
        submissions = await self.list_submissions()
        tag_counts: Counter = Counter(
            tag for submission in submissions for tag in submission.tags
        )
        severity_counts = {severity: 0 for severity in Severity}
        for submission in submissions:
            if submission.crisis_assessment is not None:
                severity_counts[submission.crisis_assessment.severity] += 1

        average_mood = None
        if submissions:
            average_mood = round(
                sum(submission.mood for submission in submissions) / len(submissions), 2
            )

        return StatsResponse(
            total_submissions=len(submissions),
            average_mood=average_mood,
            common_tags=[
                TagCount(tag=tag, count=count)
                for tag, count in tag_counts.most_common(top_tags)
            ],
            severity_counts=severity_counts,
        )
