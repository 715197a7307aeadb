from __future__ import annotations

import re


NARROW_NBSP = "\u202f"
FRACTION_SLASH = "\u2044"
MULTIPLICATION_SIGN = "\u00d7"
EN_DASH = "\u2013"

FRACTION_RE = re.compile(r"(?<=\d)/(?=\d)")
MULTIPLY_RE = re.compile(r"(?<=\d)x(?=\d)")
RANGE_RE = re.compile(r"(?<=\d)-(?=\d)")


def fancy(text: str | None) -> str:
    """Typographic clean-up for step and ingredient text.

    ``350°F`` gains a narrow no-break space, ``3/4`` a fraction slash,
    ``9x13`` a multiplication sign and ``10-12`` an en dash.
    """
    if not text or not text.strip():
        return ""

    processed = text.replace("°F", f"{NARROW_NBSP}°F")
    processed = FRACTION_RE.sub(FRACTION_SLASH, processed)
    processed = MULTIPLY_RE.sub(MULTIPLICATION_SIGN, processed)
    processed = RANGE_RE.sub(EN_DASH, processed)
    return processed
