import pytest

from horoscope_engine.aspects import AspectEngine, angular_separation, dominant_aspect, is_applying
from horoscope_engine.models import AspectType, CelestialBody


def make_body(name, longitude, speed=1.0):
    return CelestialBody(name=name, symbol="", longitude=longitude, latitude=0.0, distance=1.0, speed=speed)


@pytest.mark.parametrize(
    "separation, expected",
    [
        (0.0, AspectType.CONJUNCTION),
        (60.0, AspectType.SEXTILE),
        (90.0, AspectType.SQUARE),
        (120.0, AspectType.TRINE),
        (180.0, AspectType.OPPOSITION),
    ],
)
def test_exact_angles(separation, expected):
    aspect = AspectEngine().aspect_between(make_body("A", 15.0), make_body("B", 15.0 + separation))
    assert aspect is not None
    assert aspect.type is expected
    assert aspect.orb == pytest.approx(0.0)


def test_square_orb_boundary():
    engine = AspectEngine()
    assert engine.aspect_between(make_body("A", 0.0), make_body("B", 98.01)) is None
    aspect = engine.aspect_between(make_body("A", 0.0), make_body("B", 97.99))
    assert aspect.type is AspectType.SQUARE
    assert aspect.orb == pytest.approx(7.99)


def test_sextile_has_tighter_orb():
    engine = AspectEngine()
    assert engine.aspect_between(make_body("A", 0.0), make_body("B", 66.5)) is None
    assert engine.aspect_between(make_body("A", 0.0), make_body("B", 65.5)).type is AspectType.SEXTILE


def test_separation_wraps_around_aries():
    a, b = make_body("A", 355.0), make_body("B", 5.0)
    assert angular_separation(a, b) == pytest.approx(10.0)
    # 10 degrees is outside the conjunction orb.
    assert AspectEngine().aspect_between(a, b) is None

    a, b = make_body("A", 357.0), make_body("B", 3.0)
    assert angular_separation(a, b) == pytest.approx(6.0)
    aspect = AspectEngine().aspect_between(a, b)
    assert aspect.type is AspectType.CONJUNCTION
    assert aspect.orb == pytest.approx(6.0)


def test_ten_and_hundred_make_an_exact_square():
    aspects = AspectEngine().aspects_between([make_body("Sun", 10.0), make_body("Mars", 100.0)])
    assert len(aspects) == 1
    assert aspects[0].type is AspectType.SQUARE
    assert aspects[0].orb == pytest.approx(0.0)
    assert aspects[0].label == "Sun square Mars"


def test_single_set_compares_each_pair_once():
    bodies = [make_body(f"B{i}", 0.0) for i in range(4)]
    aspects = AspectEngine().aspects_between(bodies)
    assert len(aspects) == 6
    assert AspectEngine().aspects_between(bodies, bodies) == aspects


def test_two_sets_compare_the_cross_product():
    transits = [make_body("T1", 0.0), make_body("T2", 0.0)]
    natal = [make_body("N1", 0.0), make_body("N2", 180.0), make_body("N3", 45.0)]
    aspects = AspectEngine().aspects_between(transits, natal)
    assert len(aspects) == 4
    assert all(a.first.name.startswith("T") for a in aspects)


def test_results_are_sorted_by_orb():
    natal = [make_body("N1", 95.0), make_body("N2", 1.0), make_body("N3", 123.0)]
    aspects = AspectEngine().aspects_between([make_body("T", 0.0)], natal)
    assert [a.second.name for a in aspects] == ["N2", "N3", "N1"]
    assert [a.orb for a in aspects] == sorted(a.orb for a in aspects)
    assert dominant_aspect(aspects).second.name == "N2"


def test_max_orb_tightens_every_aspect():
    engine = AspectEngine(max_orb=3.0)
    assert engine.orb_for(AspectType.TRINE) == 3.0
    assert engine.aspect_between(make_body("A", 0.0), make_body("B", 124.0)) is None
    assert engine.aspect_between(make_body("A", 0.0), make_body("B", 122.0)).type is AspectType.TRINE


def test_dominant_aspect_of_nothing():
    assert dominant_aspect([]) is None


def test_applying_and_separating():
    engine = AspectEngine()
    # Fast body behind the slow one closes the gap.
    applying = engine.aspect_between(make_body("Moon", 85.0, speed=13.0), make_body("Sun", 90.0, speed=1.0))
    assert is_applying(applying)
    separating = engine.aspect_between(make_body("Moon", 95.0, speed=13.0), make_body("Sun", 90.0, speed=1.0))
    assert not is_applying(separating)
