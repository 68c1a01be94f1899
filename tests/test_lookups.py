import pytest

from horoscope_engine.interpretation import corpus
from horoscope_engine.interpretation.lookups import ALL_TABLES, mood_influence
from horoscope_engine.zodiac import SIGN_ORDER, ZodiacSign


@pytest.mark.parametrize("name", sorted(ALL_TABLES))
def test_every_sign_table_covers_the_zodiac(name):
    table = ALL_TABLES[name]
    assert set(table) == set(SIGN_ORDER)
    assert all(isinstance(text, str) and text for text in table.values())


def test_moon_variations_cover_every_sign():
    assert set(corpus.MOON_SIGN_VARIATIONS) == set(SIGN_ORDER)
    for sign, variations in corpus.MOON_SIGN_VARIATIONS.items():
        assert len(variations) == 3
        assert all(text.startswith(f"Moon in {sign.value}.") for text in variations)


def test_mood_influence_is_text():
    assert mood_influence(ZodiacSign.PISCES, ZodiacSign.VIRGO)
