import pygame
import pytest

from frogger import text as txt
from frogger.assets import char_assets
from frogger.config import resize


@pytest.mark.parametrize("digit", "0123456789")
def test_digits_map_to_their_value(digit):
    assert txt.char_index(digit) == int(digit)


def test_letters_follow_digits_and_ignore_case():
    assert txt.char_index("a") == txt.char_index("9") + 1
    assert txt.char_index("Q") == txt.char_index("q")
    assert txt.char_index("z") == len(char_assets("y")) - 1


@pytest.mark.parametrize("ch", [" ", "!", "-", "?"])
def test_unprintable_is_blank(ch):
    assert txt.char_index(ch) is None


def test_format_score_pads():
    assert txt.format_score(7) == "007"
    assert txt.format_score(45) == "045"
    assert txt.format_score(123) == "123"


@pytest.mark.parametrize("points", [-1, 1000])
def test_format_score_out_of_range(points):
    with pytest.raises(ValueError):
        txt.format_score(points)


def test_glyph_placements_skip_blanks_but_keep_spacing():
    font = char_assets("y")
    placed = txt.glyph_placements("A B", font, 5, 7, 10)
    assert [p[1] for p in placed] == [5, 5 + 2 * 10]
    assert all(p[2] == 7 for p in placed)
    assert placed[0][0] == font[txt.char_index("A")]


def test_create_centered_shifts_left_by_half_width():
    font = char_assets("y")
    label = txt.Text.create("PLAY", font, 100, 50, 10, True)
    assert label.x + len("PLAY") * 10 / 2 == 100
    plain = txt.Text.create("PLAY", font, 100, 50, 10, False)
    assert plain.x == 100


def test_contains():
    label = txt.Text.create("MENU", char_assets("b"), 200, 100, 30, True)
    assert label.contains(label.x + 1, label.y + 1)
    assert label.contains(label.x + 4 * resize(30), label.y + 30)
    assert not label.contains(label.x - 1, label.y + 1)
    assert not label.contains(label.x + 1, label.y + 31)


def test_update_replaces_text():
    label = txt.Text.create("OLD", char_assets("y"), 0, 0, 8, False)
    label.update("NEW")
    assert label.text == "NEW"


def test_twinkle_toggles_selected_only():
    normal, chosen = char_assets("y"), char_assets("r")
    labels = [txt.Text.create(s, normal, 0, 0, 8, False) for s in ("A", "B", "C")]
    txt.twinkle(labels, 1, normal, chosen)
    assert [label.font == chosen for label in labels] == [False, True, False]
    txt.twinkle(labels, 1, normal, chosen)
    assert all(label.font == normal for label in labels)


def test_twinkle_resets_previous_selection():
    normal, chosen = char_assets("v"), char_assets("b")
    labels = [txt.Text.create(s, chosen, 0, 0, 8, False) for s in ("A", "B")]
    result = txt.twinkle(labels, 0, normal, chosen)
    assert result[0].font == normal
    assert result[1].font == normal


def test_draw_places_glyphs_on_target():
    sheet = pygame.Surface((200, 400))
    sheet.fill((0, 0, 0))
    font = char_assets("y")
    glyph = font[txt.char_index("1")]
    sheet.fill((255, 255, 0), glyph.rect)
    target = pygame.Surface((100, 50))
    target.fill((0, 0, 255))
    label = txt.Text.create("1 ", font, 0, 0, 16, False)
    label.draw(target, sheet)
    assert target.get_at((0, 0))[:3] == (255, 255, 0)
    assert target.get_at((15, 15))[:3] == (255, 255, 0)
    assert target.get_at((20, 5))[:3] == (0, 0, 255)