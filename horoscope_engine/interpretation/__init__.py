"""Insight, theme and tag generation."""

from .generator import CATEGORIES, InsightGenerator, category_for_question
from .tags import primary_tag, tags_for, tone_of
from .themes import ThemeGenerator

__all__ = [
    "CATEGORIES",
    "InsightGenerator",
    "ThemeGenerator",
    "category_for_question",
    "primary_tag",
    "tags_for",
    "tone_of",
]
