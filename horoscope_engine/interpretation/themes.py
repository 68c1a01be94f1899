"""Short theme lines driven by fast-planet transits to the natal chart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..aspects import AspectEngine
from ..models import AspectType, BirthChart, CelestialBody
from ..scoring import index_for, seed_from_parts
from ..zodiac import ZodiacSign

A = AspectType
S = ZodiacSign

FAST_PLANETS = ["Moon", "Mercury", "Venus", "Mars", "Sun"]
WEEKLY_PLANETS = ["Mars", "Venus", "Mercury", "Jupiter"]
NATAL_TARGETS = ["Sun", "Moon", "Mercury", "Venus", "Mars"]
WEEKLY_NATAL_TARGETS = ["Sun", "Moon"]

PLANET_WEIGHTS = {"Sun": 10, "Moon": 9, "Venus": 8, "Mars": 8, "Mercury": 7, "Jupiter": 6}
DEFAULT_PLANET_WEIGHT = 5
ASPECT_WEIGHTS = {
    A.CONJUNCTION: 10,
    A.OPPOSITION: 9,
    A.SQUARE: 8,
    A.TRINE: 6,
    A.SEXTILE: 5,
}

TRANSIT_THEMES = {
    ("Moon", "Sun", A.CONJUNCTION): [
        "trust your instincts over everyone else's opinions",
        "feelings and identity agree today, so use the clarity",
        "what you feel today shows you what you need",
    ],
    ("Moon", "Sun", A.OPPOSITION): [
        "your feelings versus your ego, and both are valid",
        "the tension you feel is asking you to grow",
        "outside pressure is revealing something inside",
    ],
    ("Moon", "Sun", A.SQUARE): [
        "uncomfortable feelings are growth in disguise",
        "emotions are testing your sense of self on purpose",
        "friction between mood and identity builds character",
    ],
    ("Moon", "Sun", A.TRINE): [
        "everything flows when you trust yourself",
        "your emotions back your goals today",
        "what feels natural is what you need",
    ],
    ("Moon", "Moon", A.CONJUNCTION): [
        "an emotional reset, so honour what comes up",
        "today's feelings show you your patterns",
        "clarity comes through feeling all of it",
    ],
    ("Moon", "Moon", A.OPPOSITION): [
        "current feelings versus habitual reactions",
        "what worked before may not work now, and that is growth",
        "emotional tension is asking you to evolve",
    ],
    ("Venus", "Sun", A.CONJUNCTION): [
        "people are drawn to your energy right now",
        "what you value and who you are line up today",
        "charm is effortless when you are authentic",
    ],
    ("Venus", "Sun", A.SQUARE): [
        "approval versus authenticity: choose yourself",
        "relationship tension shows what needs to change",
        "being liked matters less than being real",
    ],
    ("Venus", "Sun", A.TRINE): [
        "love flows when you are unapologetically yourself",
        "relationships work when you stop forcing them",
        "natural charm attracts the right people",
    ],
    ("Venus", "Moon", A.CONJUNCTION): [
        "your heart knows who belongs in your life",
        "emotional and romantic needs finally match",
        "trust what your feelings say about people",
    ],
    ("Venus", "Moon", A.SQUARE): [
        "what you want versus what you need in love",
        "comfort is not always growth",
        "familiar patterns may be keeping you stuck",
    ],
    ("Venus", "Moon", A.TRINE): [
        "emotions steer you toward the right connections",
        "vulnerability creates intimacy today",
        "softness is strength in the right company",
    ],
    ("Venus", "Venus", A.CONJUNCTION): [
        "you are redefining what you value in relationships",
        "old patterns in love get a fresh look",
        "your standards are evolving, so let them",
    ],
    ("Venus", "Venus", A.OPPOSITION): [
        "what you give versus what you get",
        "notice who is actually showing up for you",
        "balance in love needs honesty about needs",
    ],
    ("Mars", "Sun", A.CONJUNCTION): [
        "your drive is strong right now, so aim it well",
        "anger is passion without direction",
        "act on what you have been planning",
    ],
    ("Mars", "Sun", A.SQUARE): [
        "frustration is momentum trying to break through",
        "pushback makes you prove yourself",
        "conflict shows where boundaries need to be firmer",
    ],
    ("Mars", "Sun", A.OPPOSITION): [
        "outside challenges test inner strength",
        "pushback shows you what matters most",
        "competition brings out your determination",
    ],
    ("Mars", "Sun", A.TRINE): [
        "motivation comes easily, so ride it",
        "bold moves pay off when the timing is right",
        "confidence backed by action gets results",
    ],
    ("Mars", "Mars", A.CONJUNCTION): [
        "you are resetting how you go after what you want",
        "old anger patterns need new outlets",
        "channel intensity into building, not burning",
    ],
    ("Mars", "Mars", A.SQUARE): [
        "impatience is energy without focus",
        "slow progress beats reckless momentum",
        "pick your battles today",
    ],
    ("Mercury", "Sun", A.CONJUNCTION): [
        "thoughts and identity sync up",
        "speak plainly, clarity is on your side",
        "mental fog clears when you are honest",
    ],
    ("Mercury", "Sun", A.SQUARE): [
        "miscommunication reveals what needs saying",
        "overthinking blocks instinct",
        "the hard conversations matter most",
    ],
    ("Mercury", "Mercury", A.CONJUNCTION): [
        "your mind is rewiring how it processes things",
        "old thought patterns get challenged",
        "clarity comes through confusion first",
    ],
    ("Mercury", "Moon", A.CONJUNCTION): [
        "logic and emotion finally agree",
        "say what you feel, your words carry weight",
        "thinking through feelings brings insight",
    ],
    ("Mercury", "Moon", A.SQUARE): [
        "what you think versus what you feel, and both matter",
        "over-analysis drowns out what your emotions carry",
        "sometimes feeling is more honest than thinking",
    ],
}

WEEKLY_TRANSIT_THEMES = {
    ("Mars", "Sun", A.SQUARE): "the obstacles you face are strengthening your resolve",
    ("Mars", "Sun", A.OPPOSITION): "outside resistance reveals your inner power",
    ("Mars", "Sun", A.TRINE): "your actions line up with your goals this week",
    ("Venus", "Sun", A.SQUARE): "relationship dynamics show you what needs shifting",
    ("Venus", "Sun", A.TRINE): "connections deepen when you show up as yourself",
    ("Venus", "Moon", A.SQUARE): "comfort versus growth in relationships, choose carefully",
    ("Mercury", "Sun", A.SQUARE): "communication snags force necessary conversations",
    ("Mercury", "Moon", A.SQUARE): "thoughts versus feelings, integration is the goal",
    ("Jupiter", "Sun", A.CONJUNCTION): "this week opens doors you did not know existed",
    ("Jupiter", "Sun", A.TRINE): "opportunities multiply when you trust the process",
}

UNIVERSAL_THEMES = [
    "your gut knows more than your anxiety does",
    "the thing you are avoiding probably needs attention",
    "your sensitivity picks up what others miss",
    "boundaries are how you protect your energy",
    "what feels like falling apart is falling together",
    "discomfort means you are outgrowing old patterns",
    "the mess is part of the process",
    "clarity comes through confusion, not around it",
    "stop explaining yourself to people who will not listen",
    "not everyone deserves access to the real you",
    "chemistry is not compatibility",
    "your oddness is your edge",
    "people-pleasing is self-abandonment",
    "trust what your body is telling you",
    "if it feels off, it probably is",
    "feelings are not facts, but they carry information",
    "anger usually means a boundary was crossed",
    "rushing the process breaks the process",
    "some things cannot be forced, only allowed",
    "not deciding is still a decision",
    "action creates clarity",
    "your worth is not negotiable",
    "you teach people how to treat you",
    "courage is doing it scared",
    "comfort is not the same as safety",
    "how people treat you reveals them, not you",
    "closure comes from you, not them",
]

WEEKLY_THEMES = [
    "this week tests what you say you want",
    "old patterns show up so you can release them",
    "what you resist this week needs integration",
    "this week rewards honest action over perfect planning",
    "relationships mirror what you need to heal",
    "your edge this week is saying what needs saying",
    "progress looks messy before it looks clean",
    "this week asks whether you are growing or just coping",
    "the easy path this week is usually the wrong one",
    "what feels hard now becomes your foundation later",
    "this week forces honesty where you have been avoiding it",
    "the friction you feel is redirecting you",
]

SUN_SIGN_THEMES = {
    S.ARIES: "your impatience is momentum waiting to be channelled",
    S.TAURUS: "stability turns into stagnation without growth",
    S.GEMINI: "your scattered energy is collecting information",
    S.CANCER: "feeling deeply is a strength",
    S.LEO: "needing attention and needing to be seen are different things",
    S.VIRGO: "perfectionism protects you from trying",
    S.LIBRA: "keeping the peace while losing yourself is not balance",
    S.SCORPIO: "your intensity unsettles people who live on the surface",
    S.SAGITTARIUS: "restlessness means you are ready to expand",
    S.CAPRICORN: "achievement without self-compassion is just punishment",
    S.AQUARIUS: "being different is a gift, not a burden",
    S.PISCES: "empathy needs boundaries to stay a gift",
}

MOON_SIGN_THEMES = {
    S.ARIES: "emotional directness is honesty, not aggression",
    S.TAURUS: "needing security does not make you needy",
    S.GEMINI: "talking through feelings is valid processing",
    S.CANCER: "guarding your heart made sense once; when does it open?",
    S.LEO: "your feelings deserve an audience, starting with you",
    S.VIRGO: "analysing emotions keeps you from feeling them",
    S.LIBRA: "keeping emotional peace should not cost your peace",
    S.SCORPIO: "emotional intensity is depth, not drama",
    S.SAGITTARIUS: "emotional restlessness points toward growth",
    S.CAPRICORN: "emotions do not have to be useful to be valid",
    S.AQUARIUS: "detachment can protect you from connection",
    S.PISCES: "absorbing other people's moods helps no one",
}


@dataclass(frozen=True)
class PersonalTransit:
    transit: str
    natal: str
    aspect: AspectType
    orb: float

    @property
    def intensity(self) -> int:
        return PLANET_WEIGHTS.get(self.transit, DEFAULT_PLANET_WEIGHT) + ASPECT_WEIGHTS[self.aspect]


def personal_transits(
    chart: BirthChart,
    transit_bodies: Sequence[CelestialBody],
    transit_names: Sequence[str],
    natal_names: Sequence[str],
) -> list[PersonalTransit]:
    """Transit-to-natal contacts, most intense first (ties keep body order)."""

    engine = AspectEngine()
    found = []
    for body in transit_bodies:
        if body.name not in transit_names:
            continue
        for natal_name in natal_names:
            aspect = engine.aspect_between(body, chart.body(natal_name))
            if aspect is not None:
                found.append(PersonalTransit(body.name, natal_name, aspect.type, aspect.orb))
    return sorted(found, key=lambda t: -t.intensity)


def theme_seed(chart: BirthChart, transit_bodies: Sequence[CelestialBody], salt: str) -> int:
    parts = [str(chart.sun_sign.index), str(chart.moon_sign.index), str(chart.ascendant_sign.index)]
    parts.extend(f"{b.name}:{round(b.longitude)}" for b in transit_bodies)
    parts.append(salt)
    return seed_from_parts(parts)


def _pick_unused(pool: Sequence[str], seed: int, taken: list[str]) -> str | None:
    """Seeded pick that skips entries already taken; None when the pool is used up."""

    start = index_for(seed, len(pool))
    for step in range(len(pool)):
        candidate = pool[(start + step) % len(pool)]
        if candidate not in taken:
            return candidate
    return None


class ThemeGenerator:
    def daily_themes(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], count: int = 3) -> list[str]:
        themes: list[str] = []
        for n, transit in enumerate(personal_transits(chart, transit_bodies, FAST_PLANETS, NATAL_TARGETS)):
            if len(themes) >= count:
                break
            pool = TRANSIT_THEMES.get((transit.transit, transit.natal, transit.aspect))
            if not pool:
                continue
            theme = _pick_unused(pool, theme_seed(chart, transit_bodies, f"transit-{n}"), themes)
            if theme is not None:
                themes.append(theme)

        pool = UNIVERSAL_THEMES + [SUN_SIGN_THEMES[chart.sun_sign], MOON_SIGN_THEMES[chart.moon_sign]]
        self._fill(themes, pool, count, chart, transit_bodies, "universal")
        return themes

    def weekly_themes(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], count: int = 3) -> list[str]:
        themes: list[str] = []
        for transit in personal_transits(chart, transit_bodies, WEEKLY_PLANETS, WEEKLY_NATAL_TARGETS):
            if len(themes) >= count:
                break
            theme = WEEKLY_TRANSIT_THEMES.get((transit.transit, transit.natal, transit.aspect))
            if theme is not None and theme not in themes:
                themes.append(theme)

        self._fill(themes, WEEKLY_THEMES, count, chart, transit_bodies, "weekly")
        return themes

    def _fill(
        self,
        themes: list[str],
        pool: Sequence[str],
        count: int,
        chart: BirthChart,
        transit_bodies: Sequence[CelestialBody],
        salt: str,
    ) -> None:
        n = 0
        while len(themes) < count:
            theme = _pick_unused(pool, theme_seed(chart, transit_bodies, f"{salt}-{n}"), themes)
            if theme is None:
                break
            themes.append(theme)
            n += 1
