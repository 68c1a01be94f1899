from datetime import date

import pytest

from horoscope_engine.interpretation import InsightGenerator, category_for_question
from horoscope_engine.interpretation import corpus
from horoscope_engine.interpretation.generator import cycle_influence, duration_label
from horoscope_engine.models import AspectType, CelestialBody, CycleInfluence
from horoscope_engine.zodiac import ZodiacSign

DAY = date(2024, 3, 15)
DURATIONS = {"< 3 days", "3-7 days", "1-4 weeks", "> 30 days"}


def make_body(name, longitude, speed=1.0):
    return CelestialBody(name=name, symbol="", longitude=longitude, latitude=0.0, distance=1.0, speed=speed)


def transits_with_moon(moon_longitude, **others):
    bodies = [make_body("Moon", moon_longitude, speed=13.2)]
    bodies.extend(make_body(name, lon) for name, lon in others.items())
    return bodies


def test_no_moon_means_steady_day(sample_chart):
    text = InsightGenerator().daily_insight(sample_chart, [make_body("Sun", 10.0)], DAY)
    assert text == corpus.STEADY_DAY


def test_moon_conjunct_natal_sun_uses_curated_text(sample_chart):
    text = InsightGenerator().daily_insight(sample_chart, transits_with_moon(54.5), DAY)
    assert text == corpus.MOON_ASPECT_TEXTS[("Sun", AspectType.CONJUNCTION)]


def test_moon_without_tight_aspect_uses_sign_variation(sample_chart):
    # 165 is Virgo and stays more than 3 degrees from every natal personal body.
    text = InsightGenerator().daily_insight(sample_chart, transits_with_moon(165.0), DAY)
    assert text in corpus.MOON_SIGN_VARIATIONS[ZodiacSign.VIRGO]
    assert text.startswith("Moon in Virgo.")


def test_aspect_without_curated_text_falls_back_to_variation(sample_chart):
    # Exact sextile to the natal Sun; sextiles have no curated daily text.
    text = InsightGenerator().daily_insight(sample_chart, transits_with_moon(114.5), DAY)
    assert text in corpus.MOON_SIGN_VARIATIONS[ZodiacSign.CANCER]


def test_daily_insight_is_deterministic(sample_chart):
    generator = InsightGenerator()
    transits = transits_with_moon(165.0)
    assert generator.daily_insight(sample_chart, transits, DAY) == generator.daily_insight(sample_chart, transits, DAY)


@pytest.mark.parametrize("category", ["love", "career", "money", "future", "general"])
def test_category_insight_ends_with_a_closing(sample_chart, category):
    text = InsightGenerator().daily_insight(sample_chart, transits_with_moon(165.0, Jupiter=60.0), DAY, category)
    assert any(text.endswith(closing) for closing in corpus.CATEGORY_CLOSINGS[category])


def test_love_insight_names_natal_venus_and_transit_moon(sample_chart):
    text = InsightGenerator().category_insight(sample_chart, transits_with_moon(165.0), DAY, "love")
    assert "Venus in Aries" in text
    assert "Moon now in Virgo" in text


def test_career_insight_names_sun_and_mars(sample_chart):
    text = InsightGenerator().category_insight(sample_chart, [], DAY, "career")
    assert text.startswith("Your Taurus Sun")
    assert "Mars in Aquarius" in text


def test_unknown_category_raises(sample_chart):
    with pytest.raises(ValueError):
        InsightGenerator().category_insight(sample_chart, [], DAY, "health")


def test_weekly_insight_opening(sample_chart):
    text = InsightGenerator().weekly_insight(sample_chart, transits_with_moon(165.0), DAY)
    assert text.startswith("This week, the Moon's journey through Virgo highlights your ")
    assert "As a Taurus, you're called to " in text


def test_monthly_and_yearly_defaults_without_transits(sample_chart):
    generator = InsightGenerator()
    assert corpus.MONTHLY_DEFAULT in generator.monthly_insight(sample_chart, [], DAY)
    assert corpus.YEARLY_DEFAULT in generator.yearly_insight(sample_chart, [], DAY)
    assert generator.energy_pattern(sample_chart, []) == corpus.BALANCED_ENERGY


def test_personality_core_mentions_traits(sample_chart):
    generator = InsightGenerator()
    assert generator.personality_core(sample_chart).startswith(generator.personality_traits(sample_chart))


@pytest.mark.parametrize(
    "question, expected",
    [
        ("Will my partner call me back?", "love"),
        ("Should I talk to my boss?", "career"),
        ("Is this a good time to invest?", "money"),
        ("What will next year bring?", "future"),
        ("Hello there", "general"),
    ],
)
def test_category_for_question(question, expected):
    assert category_for_question(question) == expected


@pytest.mark.parametrize(
    "speed, orb, expected",
    [
        (13.0, 8.0, "< 3 days"),
        (1.0, 2.0, "3-7 days"),
        (1.0, 8.0, "1-4 weeks"),
        (-0.5, 8.0, "> 30 days"),
        (0.0, 8.0, "> 30 days"),
    ],
)
def test_duration_label(speed, orb, expected):
    assert duration_label(speed, orb) == expected


def test_cycle_influence():
    assert cycle_influence("Venus", "Sun", AspectType.TRINE) is CycleInfluence.POSITIVE
    assert cycle_influence("Mars", "Sun", AspectType.SQUARE) is CycleInfluence.CHALLENGING
    assert cycle_influence("Pluto", "Sun", AspectType.CONJUNCTION) is CycleInfluence.TRANSFORMATIVE
    assert cycle_influence("Venus", "Sun", AspectType.CONJUNCTION) is CycleInfluence.NEUTRAL


def test_transit_cycles(sample_chart):
    transits = [make_body("Pluto", 54.0, speed=-0.01), make_body("Mars", 150.0, speed=0.6), make_body("Venus", 176.0)]
    cycles = InsightGenerator().cycles(sample_chart, DAY, transits)
    assert 1 <= len(cycles) <= 3
    assert len({c.title for c in cycles}) == len(cycles)
    assert all(c.duration in DURATIONS for c in cycles)
    first = cycles[0]
    assert first.planetary_aspect == "Pluto conjunct Sun"
    assert first.influence is CycleInfluence.TRANSFORMATIVE
    assert first.duration == "> 30 days"


def test_transit_cycle_lasts_as_long_as_the_transiting_body_allows(sample_chart):
    # The fast Moon crosses slow natal Saturn; its own speed sets the span.
    cycles = InsightGenerator().cycles(sample_chart, DAY, [make_body("Moon", 295.5, speed=13.2)])
    assert cycles[0].planetary_aspect == "Moon conjunct Saturn"
    assert cycles[0].duration == "< 3 days"


def test_natal_cycle_uses_the_slower_body(sample_chart):
    first = InsightGenerator().cycles(sample_chart, DAY)[0]
    # Mercury 40 and Jupiter 100 form an exact sextile; Jupiter moves 0.23 deg/day.
    assert first.planetary_aspect == "Mercury sextile Jupiter"
    assert first.duration == "> 30 days"


def test_natal_cycles_without_transits(sample_chart):
    cycles = InsightGenerator().cycles(sample_chart, DAY)
    assert len(cycles) == 3
    assert all(c.duration in DURATIONS for c in cycles)
    assert cycles == InsightGenerator().cycles(sample_chart, DAY)


def test_themes_are_unique_and_stable(sample_chart):
    generator = InsightGenerator()
    transits = transits_with_moon(54.5, Venus=21.0, Mars=300.0)
    themes = generator.themes(sample_chart, transits)
    assert len(themes) == 3
    assert len(set(themes)) == 3
    assert themes == generator.themes(sample_chart, transits)


def test_weekly_themes_fill_from_pool(sample_chart):
    themes = InsightGenerator().weekly_themes(sample_chart, [], count=4)
    assert len(themes) == 4
    assert len(set(themes)) == 4


def test_affirmations_step_through_the_list():
    picks = InsightGenerator().affirmations(DAY)
    assert len(picks) == 3
    day_of_year = DAY.timetuple().tm_yday
    assert picks[0] == corpus.AFFIRMATIONS[day_of_year % len(corpus.AFFIRMATIONS)]
