import math

import pytest

from horoscope_engine.errors import InvalidLongitude
from horoscope_engine.zodiac import (
    Element,
    ZodiacSign,
    format_degree,
    format_position,
    normalize_longitude,
    sign_index,
    sign_of,
)


def test_sign_of_pisces_example():
    pos = sign_of(331.5)
    assert pos.sign is ZodiacSign.PISCES
    assert pos.sign.index == 11
    assert (pos.degree, pos.minute) == (1, 30)


@pytest.mark.parametrize("longitude", [0.0, 29.999, 30.0, 123.456, 271.01, 359.99])
def test_position_round_trip_within_one_minute(longitude):
    back = sign_of(longitude).to_longitude()
    assert -1e-6 <= longitude - back < 1.0 / 60.0 + 1e-9


@pytest.mark.parametrize("k", [-3, -1, 1, 2, 5])
def test_sign_is_invariant_under_full_turns(k):
    assert sign_of(47.25 + 360.0 * k) == sign_of(47.25)


@pytest.mark.parametrize("longitude", [0.2, -359.8, 720.2])
def test_whole_minutes_survive_float_noise(longitude):
    pos = sign_of(longitude)
    assert (pos.sign, pos.degree, pos.minute) == (ZodiacSign.ARIES, 0, 12)


def test_minute_boundary_inside_a_sign():
    assert format_position(12.2, use_symbol=False) == "Aries 12°12'"
    assert format_position(47.25, use_symbol=False) == "Taurus 17°15'"


def test_negative_longitude_wraps():
    assert normalize_longitude(-30.0) == 330.0
    assert sign_index(-0.5) == 11


def test_tiny_negative_does_not_reach_360():
    value = normalize_longitude(-1e-17)
    assert 0.0 <= value < 360.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_longitude_raises(bad):
    with pytest.raises(InvalidLongitude):
        sign_of(bad)


def test_elements_cycle_from_aries():
    assert ZodiacSign.ARIES.element is Element.FIRE
    assert ZodiacSign.TAURUS.element is Element.EARTH
    assert ZodiacSign.GEMINI.element is Element.AIR
    assert ZodiacSign.CANCER.element is Element.WATER
    assert ZodiacSign.SAGITTARIUS.element is Element.FIRE
    assert ZodiacSign.PISCES.element is Element.WATER


def test_format_degree():
    assert format_degree(331.5) == "1°30'"
    assert format_degree(59.99) == "29°59'"


def test_format_position():
    assert format_position(331.5) == "♓ 1°30'"
    assert format_position(331.5, use_symbol=False) == "Pisces 1°30'"
    assert format_position(0.0, use_symbol=False) == "Aries 0°00'"
