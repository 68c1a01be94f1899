from horoscope_engine.interpretation import primary_tag, tags_for, tone_of
from horoscope_engine.interpretation.tags import GENERAL_TAG, STEADY_TONE


def categories(text):
    return [tag.category for tag in tags_for(text)]


def test_multiple_tags_in_table_order():
    assert categories("Your career gets a boost while love waits") == ["love", "career"]


def test_prefix_matching_at_word_start():
    assert categories("Feelings run deep") == ["emotion"]
    assert categories("Good communication helps") == ["communication"]
    assert "career" not in categories("Your network grows")


def test_untagged_text_is_general():
    assert tags_for("Nothing special here") == [GENERAL_TAG]
    assert primary_tag("") == GENERAL_TAG


def test_primary_tag_icon():
    tag = primary_tag("A financial decision is due")
    assert (tag.category, tag.icon) == ("money", "dollarsign.circle")


def test_tone_priority():
    assert tone_of("A lesson arrives with an opportunity") == "challenging"
    assert tone_of("Expansion is in the air") == "expansive"
    assert tone_of("A sudden breakthrough") == "unpredictable"
    assert tone_of("Quiet afternoon") == STEADY_TONE


def test_tagging_does_not_change_text():
    text = "Love and money, plus a transformation."
    tags_for(text)
    tone_of(text)
    assert text == "Love and money, plus a transformation."
