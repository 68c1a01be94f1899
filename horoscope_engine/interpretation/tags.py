"""Keyword classifiers over generated text.

Both functions only read the text. They never rewrite it.
"""

from __future__ import annotations

import re

from ..models import TextTag

# Checked in order; a text can carry several tags.
TAG_KEYWORDS: list[tuple[str, str, tuple[str, ...]]] = [
    ("love", "heart", ("love", "relationship", "partner", "romance", "romantic", "connection", "intimacy", "venus")),
    ("career", "briefcase", ("career", "work", "job", "ambition", "achievement", "goal", "project", "recognition")),
    ("money", "dollarsign.circle", ("money", "finance", "financial", "resource", "abundance", "invest", "spending", "budget")),
    ("emotion", "moon", ("emotion", "feeling", "feel", "heart", "mood", "intuition", "moon")),
    ("communication", "bubble.left.and.bubble.right", ("communicat", "conversation", "talk", "words", "message", "mercury")),
    ("growth", "sparkles", ("growth", "expansion", "expand", "opportunit", "future", "jupiter")),
    ("transformation", "flame", ("transform", "rebirth", "regenerat", "intense", "intensity", "pluto")),
]
GENERAL_TAG = TextTag(category="general", icon="star")

# Tone buckets, in priority order.
TONE_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("challenging", ("challenging", "obstacle", "pressure", "lesson", "tension", "frustrat")),
    ("expansive", ("expansive", "expansion", "abundan", "opportunit", "lucky", "growth")),
    ("transformational", ("transformation", "transformational", "power", "intense", "regenerat")),
    ("unpredictable", ("unpredictable", "breakthrough", "sudden", "disrupt")),
]
STEADY_TONE = "steady"


def _compile(keywords: tuple[str, ...]) -> re.Pattern:
    # Prefix match at a word start, so "feel" matches "feeling" but "work" skips "network".
    return re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + ")", re.IGNORECASE)


_TAG_PATTERNS = [(category, icon, _compile(words)) for category, icon, words in TAG_KEYWORDS]
_TONE_PATTERNS = [(tone, _compile(words)) for tone, words in TONE_KEYWORDS]


def tags_for(text: str) -> list[TextTag]:
    """Every matching tag in table order, or the general tag when none match."""

    tags = [TextTag(category=category, icon=icon) for category, icon, pattern in _TAG_PATTERNS if pattern.search(text)]
    return tags or [GENERAL_TAG]


def primary_tag(text: str) -> TextTag:
    return tags_for(text)[0]


def tone_of(text: str) -> str:
    for tone, pattern in _TONE_PATTERNS:
        if pattern.search(text):
            return tone
    return STEADY_TONE
