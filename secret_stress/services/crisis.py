from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Iterable, Iterator, List, Sequence, Tuple

from ..schemas import CrisisAssessment, CrisisKeyword, CrisisResource, Severity
from .keywords import (
    CRISIS_RESOURCES,
    DEFAULT_KEYWORDS,
    MEDIUM_RESOURCE_COUNT,
    SEVERITY_RESPONSES,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase and collapse whitespace runs; punctuation is left alone."""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeywordRegistry:
    """Append-only keyword table owned by whoever builds the detector.

    Seeded with the default table unless ``keywords`` is given. Only one
    writer is expected, during setup; readers always scan a snapshot.
    """

    def __init__(self, keywords: Iterable[CrisisKeyword] | None = None) -> None:
        source = DEFAULT_KEYWORDS if keywords is None else keywords
        self._keywords: List[CrisisKeyword] = list(source)

    def add(self, keyword: CrisisKeyword) -> None:
        self._keywords.append(keyword)

    def snapshot(self) -> Tuple[CrisisKeyword, ...]:
        return tuple(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def __iter__(self) -> Iterator[CrisisKeyword]:
        return iter(self.snapshot())


class CrisisDetector:
    """Rule-based detector for crisis language.

    Every registry entry is tested as a case-insensitive substring of the
    normalized text. The overall severity is the highest severity among the
    matches, and the response message comes from the first entry (in table
    order) carrying that severity.
    """

    def __init__(
        self,
        registry: KeywordRegistry | None = None,
        resources: Sequence[CrisisResource] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.registry = registry if registry is not None else KeywordRegistry()
        self._resources: Tuple[CrisisResource, ...] = tuple(
            CRISIS_RESOURCES if resources is None else resources
        )
        self._clock = clock

    def detect(self, text: str) -> CrisisAssessment:
        if not text or not text.strip():
            return CrisisAssessment(assessed_at=self._clock())

        normalized = normalize_text(text)
        matched = [
            entry
            for entry in self.registry.snapshot()
            if entry.keyword.lower() in normalized
        ]

        severity = Severity.none
        response_message = SEVERITY_RESPONSES[severity]
        if matched:
            # max() keeps the first of equal items, so ties resolve by table order.
            strongest = max(matched, key=lambda entry: entry.severity.rank)
            severity = strongest.severity
            response_message = strongest.message

        logger.debug(
            "Crisis scan: %d match(es), severity=%s", len(matched), severity.value
        )
        return CrisisAssessment(
            severity=severity,
            matched_keywords=tuple(matched),
            response_message=response_message,
            show_resources=severity in (Severity.high, Severity.critical),
            assessed_at=self._clock(),
        )

    def contains_keywords(self, text: str) -> bool:
        if not text or not text.strip():
            return False
        normalized = normalize_text(text)
        return any(
            entry.keyword.lower() in normalized for entry in self.registry.snapshot()
        )

    def highest_severity(self, text: str) -> Severity:
        return self.detect(text).severity

    def relevant_resources(self, assessment: CrisisAssessment) -> List[CrisisResource]:
        # TODO: filter by matched keyword category once resources carry categories.
        if assessment.severity in (Severity.none, Severity.low):
            return []
        if assessment.severity in (Severity.high, Severity.critical):
            return list(self._resources)
        return list(self._resources[:MEDIUM_RESOURCE_COUNT])

    def keywords(self) -> List[CrisisKeyword]:
        return list(self.registry.snapshot())

    def add_keyword(self, keyword: CrisisKeyword) -> None:
        self.registry.add(keyword)
        logger.info(
            "Registered crisis keyword (severity=%s, category=%s); table size=%d",
            keyword.severity.value,
            keyword.category.value,
            len(self.registry),
        )

    def resources(self) -> List[CrisisResource]:
        return list(self._resources)
