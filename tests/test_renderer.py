import pytest

from charades.cards import FONT_TIERS, font_size_for, present, select_font_tier, visual_length
from charades.models import Card, CardLine


def _card(*lines, image="🐶"):
    return Card(lines=tuple(CardLine(lang, text) for lang, text in lines), image=image)


@pytest.mark.parametrize("length,tier", [
    (1, "A1"), (6, "A1"), (7, "B1"), (10, "B1"), (11, "C1"), (14, "C1"), (15, "D1"), (40, "D1"),
])
def test_single_line_tiers(length, tier):
    assert select_font_tier(1, length) == tier


@pytest.mark.parametrize("length,tier", [(6, "A2"), (7, "B2"), (11, "C2"), (15, "D2")])
def test_two_line_tiers(length, tier):
    assert select_font_tier(2, length) == tier


@pytest.mark.parametrize("length,tier", [(6, "A"), (10, "B"), (14, "C"), (30, "C")])
def test_multi_line_tiers(length, tier):
    assert select_font_tier(3, length) == tier
    assert select_font_tier(4, length) == tier


def test_no_lines_has_no_tier():
    assert select_font_tier(0, 0) is None
    assert font_size_for(None) == ""


def test_tier_groups_are_strictly_ordered():
    single = [FONT_TIERS[t] for t in ("A1", "B1", "C1", "D1")]
    double = [FONT_TIERS[t] for t in ("A2", "B2", "C2", "D2")]
    multi = [FONT_TIERS[t] for t in ("A", "B", "C")]
    assert min(single) > max(double)
    assert min(double) > max(multi)
    for group in (single, double, multi):
        assert group == sorted(group, reverse=True)


def test_short_word_renders_larger_than_long_word():
    short = present(_card(("en", "Duck")))
    long = present(_card(("en", "Photosynthesis lab")))
    assert FONT_TIERS[short.tier] > FONT_TIERS[long.tier]


def test_fewer_lines_render_larger_at_equal_length():
    one = present(_card(("en", "Cat")))
    three = present(_card(("en", "Cat"), ("es", "Gat"), ("fr", "Cha")))
    assert FONT_TIERS[one.tier] > FONT_TIERS[three.tier]


def test_double_width_scripts_count_twice():
    assert visual_length("猫头鹰", "zh") == 6
    assert visual_length("ねこ", "ja") == 4
    assert visual_length("Owl", "en") == 3
    assert present(_card(("zh", "长颈鹿长颈"))).tier == "B1"
    assert present(_card(("en", "abcde"))).tier == "A1"


def test_line_styles_and_sizes():
    presentation = present(_card(("en", "Dog"), ("es", "Perro"), ("ar", "كلب")))
    styles = [line.style_class for line in presentation.text_lines]
    assert styles == ["word-primary", "word-secondary", "word-tertiary word-rtl"]
    assert presentation.layout_class == "layout-multi"
    assert presentation.tier == "A"
    assert presentation.font_size == "0.95rem"
    assert presentation.text_lines[0].font_size == "0.95rem"
    assert float(presentation.text_lines[1].font_size[:-3]) == pytest.approx(0.95 * 0.85, abs=1e-3)


def test_arabic_line_is_right_to_left():
    presentation = present(_card(("ar", "كلب")))
    line = presentation.text_lines[0]
    assert line.direction == "rtl"
    assert "word-rtl" in line.style_class
    assert "word-primary" in line.style_class


def test_card_without_lines_is_emoji_only():
    presentation = present(Card(lines=(), image="☀️"))
    assert presentation.text_lines == ()
    assert presentation.emoji == "☀️"
    assert presentation.tier is None
    assert presentation.layout_class == "layout-emoji-only"


def test_blank_lines_are_dropped():
    presentation = present(_card(("en", "Dog"), ("es", "   ")))
    assert len(presentation.text_lines) == 1
    assert presentation.layout_class == "layout-single"
    assert presentation.tier == "A1"
    assert presentation.font_size == "2.25rem"
