"""Language Detection: best-effort language code for feed posts.

Invariants:
    - Returns a lowercase ISO 639-1 code or None (never raises)
    - Text shorter than MIN_DETECT_CHARS returns None
    - Detections below MIN_CONFIDENCE return None
    - Deterministic: DetectorFactory seeded at import

Design Decisions:
    - langdetect: pure Python, no binary wheels
    - Chinese variants (zh-cn, zh-tw) collapse to "zh"
"""

import logging

from langdetect import detect_langs, DetectorFactory
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

DetectorFactory.seed = 0  # must be set before any detect() call

MIN_DETECT_CHARS = 20
MIN_CONFIDENCE = 0.7


def detect_language_code(text: str | None) -> str | None:
    """Detect the language of `text`; None when unsure."""
    if not text or len(text.strip()) < MIN_DETECT_CHARS:
        return None

    try:
        results = detect_langs(text)
    except LangDetectException as e:
        logger.debug("Language detection failed: %s", e)
        return None

    if not results:
        return None

    top = results[0]
    if top.prob < MIN_CONFIDENCE:
        return None
    return top.lang.split("-")[0].lower()
