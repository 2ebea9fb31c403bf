"""Selfie prompt assembly.

This module only builds prompt strings from user context and a mode. Mode
detection lives in `nlp.mode_detector`; model invocation happens in
`image.service`.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    User text is interpolated as a raw string. The only encoding applied is the
    JSON encoding performed by the generation client.
"""

from selfie_relay.nlp.mode_detector import MODE_AUTO, MODE_DIRECT, MODE_MIRROR, detect_mode


# =========================================================
# TEMPLATES
# =========================================================

MIRROR_TEMPLATE = (
    "make a pic of this person, but {context}. "
    "the person is taking a mirror selfie"
)

DIRECT_TEMPLATE = (
    "a close-up selfie taken by herself at {context}, "
    "direct eye contact with the camera, "
    "looking straight into the lens, "
    "eyes centered and clearly visible, "
    "not a mirror selfie, "
    "phone held at arm's length, "
    "face fully visible"
)

TEMPLATES = {
    MODE_MIRROR: MIRROR_TEMPLATE,
    MODE_DIRECT: DIRECT_TEMPLATE,
}

MODES = (MODE_AUTO, MODE_MIRROR, MODE_DIRECT)


def render_template(user_context: str, mode: str) -> str:
    """Interpolate `user_context` into the template for a resolved mode."""
    return TEMPLATES[mode].format(context=user_context)


def build_prompt(user_context: str, mode: str = MODE_AUTO) -> tuple[str, str]:
    """Resolve the selfie mode and render its prompt.

    Args:
        user_context: Free-text scene/outfit description. Empty is allowed.
        mode: `auto`, `mirror` or `direct`.

    Returns:
        `(resolved_mode, prompt_text)`.

    Raises:
        ValueError: Unknown mode value.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")

    user_context = user_context or ""
    resolved_mode = detect_mode(user_context) if mode == MODE_AUTO else mode

    return resolved_mode, render_template(user_context, resolved_mode)
