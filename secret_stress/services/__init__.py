from .crisis import CrisisDetector, KeywordRegistry, normalize_text
from .keywords import CRISIS_RESOURCES, DEFAULT_KEYWORDS, SEVERITY_RESPONSES

__all__ = [
    "CRISIS_RESOURCES",
    "CrisisDetector",
    "DEFAULT_KEYWORDS",
    "KeywordRegistry",
    "SEVERITY_RESPONSES",
    "normalize_text",
]
