"""Rule-based selfie mode detection.

Decision model:
    - Rule-based only (case-insensitive substring regexes), no model inference.
    - The direct keyword set is evaluated before the mirror keyword set.
    - Output is a mode label consumed by `prompting.prompt_builder`.

Priority order:
    1. any direct keyword -> `direct`
    2. any mirror keyword -> `mirror`
    3. `mirror` fallback

Determinism:
    For the same input text and keyword lists, output is deterministic.

Bypass risk:
    Lexical matching misses synonyms and misspellings; unmatched text silently
    falls back to `mirror`.
"""

import re

MODE_MIRROR = "mirror"
MODE_DIRECT = "direct"
MODE_AUTO = "auto"

DIRECT_KEYWORDS = [
    "cafe",
    "restaurant",
    "beach",
    "park",
    "city",
    "close-up",
    "portrait",
    "face",
    "eyes",
    "smile",
]

MIRROR_KEYWORDS = [
    "outfit",
    "wearing",
    "clothes",
    "dress",
    "suit",
    "fashion",
    "full-body",
    "mirror",
]


def _compile(keywords):
    alternation = "|".join(re.escape(k) for k in keywords)
    return re.compile(alternation, re.IGNORECASE)


DIRECT_PATTERN = _compile(DIRECT_KEYWORDS)
MIRROR_PATTERN = _compile(MIRROR_KEYWORDS)


def detect_mode(user_context: str) -> str:
    """Return `direct` or `mirror` for free-text user context.

    Evaluation order:
        1. Empty input -> `mirror`.
        2. Any direct keyword -> `direct` (wins ties with mirror keywords).
        3. Any mirror keyword -> `mirror`.
        4. Otherwise `mirror`.
    """
    if not user_context:
        return MODE_MIRROR

    if DIRECT_PATTERN.search(user_context):
        return MODE_DIRECT

    if MIRROR_PATTERN.search(user_context):
        return MODE_MIRROR

    return MODE_MIRROR
