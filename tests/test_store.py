import asyncio
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from secret_stress.schemas import Severity, SubmissionTag  # noqa: E402
from secret_stress.services import CrisisDetector  # noqa: E402
from secret_stress.store import SubmissionNotFoundError, SubmissionStore  # noqa: E402


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SubmissionStore(retention_days=30, clock=clock)


def test_save_embeds_assessment_and_trims(store):
    assessment = CrisisDetector().detect("everything is breaking down")
    saved = asyncio.run(
        store.save(
            content="  everything is breaking down  ",
            mood=2,
            tags=[SubmissionTag.exams],
            crisis_assessment=assessment,
        )
    )
    assert saved.content == "everything is breaking down"
    assert saved.crisis_assessment == assessment
    assert saved.tags == [SubmissionTag.exams]
    assert asyncio.run(store.get(saved.id)) == saved


@pytest.mark.parametrize("content", ["short", "   tiny    ", "x" * 2001])
def test_save_rejects_out_of_bounds_content(store, content):
    with pytest.raises(ValueError):
        asyncio.run(store.save(content=content, mood=3))


def test_list_is_newest_first(store, clock):
    first = asyncio.run(store.save(content="first stressful day", mood=3))
    clock.advance(minutes=5)
    second = asyncio.run(store.save(content="second stressful day", mood=4))
    listed = asyncio.run(store.list_submissions())
    assert [item.id for item in listed] == [second.id, first.id]


def test_expired_submissions_are_hidden_and_purged(store, clock):
    old = asyncio.run(store.save(content="an old worry about grades", mood=2))
    clock.advance(days=30)
    assert [item.id for item in asyncio.run(store.list_submissions())] == [old.id]

    clock.advance(seconds=1)
    assert asyncio.run(store.list_submissions()) == []
    with pytest.raises(SubmissionNotFoundError):
        asyncio.run(store.get(old.id))


def test_delete_expired_returns_count(store, clock):
    asyncio.run(store.save(content="deadline stress again", mood=2))
    asyncio.run(store.save(content="more deadline stress", mood=2))
    clock.advance(days=31)
    asyncio.run(store.save(content="fresh entry for today", mood=4))
    assert asyncio.run(store.delete_expired()) == 0
    clock.advance(days=31)
    assert asyncio.run(store.delete_expired()) == 1


def test_save_purges_expired_first(store, clock):
    asyncio.run(store.save(content="stale entry to expire", mood=1))
    clock.advance(days=45)
    asyncio.run(store.save(content="new entry stays here", mood=5))
    assert asyncio.run(store.delete_expired()) == 0
    assert len(asyncio.run(store.list_submissions())) == 1


def test_delete_unknown_raises(store):
    with pytest.raises(SubmissionNotFoundError):
        asyncio.run(store.delete("missing"))


def test_delete_and_clear(store):
    kept = asyncio.run(store.save(content="one stressful thing", mood=3))
    gone = asyncio.run(store.save(content="another stressful thing", mood=3))
    asyncio.run(store.delete(gone.id))
    assert [item.id for item in asyncio.run(store.list_submissions())] == [kept.id]
    assert asyncio.run(store.clear()) == 1
    assert asyncio.run(store.list_submissions()) == []


def test_stats(store):
    detector = CrisisDetector()
    for content, mood, tags in [
        ("exams are piling up on me", 2, [SubmissionTag.exams, SubmissionTag.sleep]),
        ("i can't take it anymore honestly", 1, [SubmissionTag.exams]),
        ("actually feeling okay this week", 5, []),
    ]:
        asyncio.run(
            store.save(
                content=content,
                mood=mood,
                tags=tags,
                crisis_assessment=detector.detect(content),
            )
        )
    stats = asyncio.run(store.stats())
    assert stats.total_submissions == 3
    assert stats.average_mood == pytest.approx(2.67)
    assert stats.common_tags[0].tag == SubmissionTag.exams
    assert stats.common_tags[0].count == 2
    assert stats.severity_counts[Severity.none] == 2
    assert stats.severity_counts[Severity.high] == 1


def test_stats_empty(store):
    stats = asyncio.run(store.stats())
    assert stats.total_submissions == 0
    assert stats.average_mood is None
    assert stats.common_tags == []
