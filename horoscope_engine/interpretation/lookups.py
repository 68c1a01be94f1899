"""Twelve-entry sign tables used to fill insight templates.

Each table maps a ZodiacSign to a short phrase along one axis (what a Venus
sign needs in love, what a Sun sign works toward, and so on).
"""

from __future__ import annotations

from ..zodiac import ZodiacSign

S = ZodiacSign

VENUS_NEED = {
    S.ARIES: "passionate, direct connections",
    S.TAURUS: "stable, sensual partnerships",
    S.GEMINI: "intellectual stimulation and variety",
    S.CANCER: "emotional security and nurturing",
    S.LEO: "appreciation and wholehearted romance",
    S.VIRGO: "practical devotion and small acts of care",
    S.LIBRA: "harmony and graceful partnership",
    S.SCORPIO: "intense, transformative bonds",
    S.SAGITTARIUS: "freedom and adventurous love",
    S.CAPRICORN: "commitment and mutual respect",
    S.AQUARIUS: "friendship and independence",
    S.PISCES: "spiritual connection and compassion",
}

SUN_PURPOSE = {
    S.ARIES: "leadership and pioneering new paths",
    S.TAURUS: "building lasting value and security",
    S.GEMINI: "communication and connecting ideas",
    S.CANCER: "nurturing and creating emotional safety",
    S.LEO: "creative self-expression and inspiring others",
    S.VIRGO: "service and refining systems",
    S.LIBRA: "creating harmony and fairness",
    S.SCORPIO: "transformation and deep investigation",
    S.SAGITTARIUS: "expansion and sharing wisdom",
    S.CAPRICORN: "achievement and building a legacy",
    S.AQUARIUS: "innovation and collective progress",
    S.PISCES: "healing and compassionate service",
}

MARS_ENERGY = {
    S.ARIES: "direct, pioneering drive",
    S.TAURUS: "steady, determined action",
    S.GEMINI: "versatile, communicative energy",
    S.CANCER: "protective, intuitive motivation",
    S.LEO: "confident, creative force",
    S.VIRGO: "precise, service-minded action",
    S.LIBRA: "diplomatic, partnership-focused drive",
    S.SCORPIO: "intense, transformative power",
    S.SAGITTARIUS: "adventurous, philosophical energy",
    S.CAPRICORN: "disciplined, ambitious drive",
    S.AQUARIUS: "inventive, community-minded action",
    S.PISCES: "compassionate, intuitive motivation",
}

MONEY_MINDSET = {
    S.ARIES: "quick decisions and bold investments",
    S.TAURUS: "steady accumulation and tangible security",
    S.GEMINI: "multiple income streams and variety",
    S.CANCER: "emotional security through savings",
    S.LEO: "generous spending on quality",
    S.VIRGO: "careful budgeting and practical investments",
    S.LIBRA: "balanced spending and a taste for beautiful things",
    S.SCORPIO: "strategic investments and hidden resources",
    S.SAGITTARIUS: "spending on experiences and education",
    S.CAPRICORN: "long-term planning and traditional investments",
    S.AQUARIUS: "unconventional investments and group ventures",
    S.PISCES: "intuitive decisions and charitable giving",
}

JUPITER_GROWTH = {
    S.ARIES: "leadership and new initiatives",
    S.TAURUS: "material growth and stability",
    S.GEMINI: "learning and communication",
    S.CANCER: "home and emotional fulfillment",
    S.LEO: "creativity and self-expression",
    S.VIRGO: "health and everyday craft",
    S.LIBRA: "relationships and artistic pursuits",
    S.SCORPIO: "transformation and hidden knowledge",
    S.SAGITTARIUS: "travel and higher learning",
    S.CAPRICORN: "career and public recognition",
    S.AQUARIUS: "technology and humanitarian causes",
    S.PISCES: "spirituality and compassion",
}

MOON_FOCUS = {
    S.ARIES: "need for independence and new beginnings",
    S.TAURUS: "desire for stability and simple pleasures",
    S.GEMINI: "curiosity and need for mental stimulation",
    S.CANCER: "emotional needs and desire for security",
    S.LEO: "creative expression and need for recognition",
    S.VIRGO: "attention to detail and desire for improvement",
    S.LIBRA: "relationships and need for harmony",
    S.SCORPIO: "transformation and emotional depth",
    S.SAGITTARIUS: "expansion and philosophical exploration",
    S.CAPRICORN: "ambition and practical achievement",
    S.AQUARIUS: "innovation and the wider community",
    S.PISCES: "intuition and spiritual connection",
}

WEEKLY_CALL = {
    S.ARIES: "initiate bold new projects",
    S.TAURUS: "build lasting foundations",
    S.GEMINI: "explore diverse interests",
    S.CANCER: "nurture yourself and others",
    S.LEO: "let your own light show",
    S.VIRGO: "refine your craft",
    S.LIBRA: "create harmony in relationships",
    S.SCORPIO: "embrace transformative experiences",
    S.SAGITTARIUS: "expand your horizons",
    S.CAPRICORN: "pursue meaningful goals",
    S.AQUARIUS: "innovate and inspire change",
    S.PISCES: "trust your intuitive wisdom",
}

SUN_TRAITS = {
    S.ARIES: "natural leadership and initiative",
    S.TAURUS: "steady determination and a practical approach",
    S.GEMINI: "curiosity and a gift for communication",
    S.CANCER: "emotional intelligence and a nurturing nature",
    S.LEO: "confidence and creative self-expression",
    S.VIRGO: "attention to detail and a helpful nature",
    S.LIBRA: "a desire for harmony and a strong aesthetic sense",
    S.SCORPIO: "intensity and the ability to see beneath the surface",
    S.SAGITTARIUS: "optimism and a love of learning",
    S.CAPRICORN: "ambition and long-term planning",
    S.AQUARIUS: "original thinking and humanitarian values",
    S.PISCES: "intuition and an empathetic nature",
}

MOON_TRAITS = {
    S.ARIES: "direct emotional expression",
    S.TAURUS: "a need for emotional security",
    S.GEMINI: "mental processing of emotions",
    S.CANCER: "deep emotional sensitivity",
    S.LEO: "warm, expressive feelings",
    S.VIRGO: "a practical emotional approach",
    S.LIBRA: "a need for emotional balance",
    S.SCORPIO: "intense emotional depth",
    S.SAGITTARIUS: "an optimistic emotional outlook",
    S.CAPRICORN: "controlled emotional expression",
    S.AQUARIUS: "an independent emotional perspective",
    S.PISCES: "intuitive emotional understanding",
}

LIFE_APPROACH = {
    S.ARIES: "direct, action-oriented approach to life",
    S.TAURUS: "steady, practical approach to life",
    S.GEMINI: "curious, communicative approach to life",
    S.CANCER: "protective, nurturing approach to life",
    S.LEO: "confident, expressive approach to life",
    S.VIRGO: "analytical, service-oriented approach to life",
    S.LIBRA: "balanced, relationship-focused approach to life",
    S.SCORPIO: "transformative, depth-seeking approach to life",
    S.SAGITTARIUS: "adventurous, growth-oriented approach to life",
    S.CAPRICORN: "structured, achievement-focused approach to life",
    S.AQUARIUS: "inventive, group-minded approach to life",
    S.PISCES: "intuitive, compassionate approach to life",
}

ALL_TABLES = {
    "venus_need": VENUS_NEED,
    "sun_purpose": SUN_PURPOSE,
    "mars_energy": MARS_ENERGY,
    "money_mindset": MONEY_MINDSET,
    "jupiter_growth": JUPITER_GROWTH,
    "moon_focus": MOON_FOCUS,
    "weekly_call": WEEKLY_CALL,
    "sun_traits": SUN_TRAITS,
    "moon_traits": MOON_TRAITS,
    "life_approach": LIFE_APPROACH,
}


def mood_influence(natal: ZodiacSign, transit: ZodiacSign) -> str:
    """How the transiting Moon's sign sits with the natal Moon's sign."""

    if natal == transit:
        return "an emotionally centering influence"
    if natal.element == transit.element:
        return "a harmonious emotional flow"
    return "an opportunity to integrate different emotional energies"
