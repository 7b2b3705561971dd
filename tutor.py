"""
AI Tutor placeholder.

No model is called: the chat reply echoes the student's message back with a
prompt to expand on it, and grammar correction only normalizes whitespace and
capitalizes the first letter. Swap these functions for a real provider call
to get actual tutoring.
"""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"[A-Za-z0-9_]")


def tutor_reply(message: str) -> str:
    """Placeholder tutor response for a chat message."""
    return (
        f'AI Tutor: I hear you say "{message}". Great attempt! '
        f'Try to expand: "{message} ... and then I..."'
    )


def correct_grammar(text: str) -> dict:
    """Naive correction: collapse whitespace, trim, capitalize a leading ASCII letter.

    Returns:
        {"corrected": str, "suggestions": [{"original": str, "corrected": str}]}
    """
    corrected = _WHITESPACE.sub(" ", text).strip()
    if _WORD_START.match(corrected):
        corrected = corrected[0].upper() + corrected[1:]
    return {
        "corrected": corrected,
        "suggestions": [{"original": text, "corrected": corrected}],
    }
