import pygame

from questmenu.quest import PURPLE, QUEST_PANEL_COLOR, Quest


def _pixel(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_background_is_purple():
    surface = pygame.Surface((600, 1000))
    Quest().draw(surface)
    assert _pixel(surface, (5, 5)) == PURPLE
    assert _pixel(surface, (595, 995)) == PURPLE


def test_panel_is_drawn():
    surface = pygame.Surface((600, 1000))
    Quest().draw(surface)
    assert _pixel(surface, (300, 475)) == (243, 216, 63)
    assert _pixel(surface, (100, 400)) == QUEST_PANEL_COLOR
    assert _pixel(surface, (499, 549)) == QUEST_PANEL_COLOR


def test_panel_bounds():
    surface = pygame.Surface((600, 1000))
    Quest().draw(surface)
    assert _pixel(surface, (99, 475)) == PURPLE
    assert _pixel(surface, (500, 475)) == PURPLE
    assert _pixel(surface, (300, 550)) == PURPLE


def test_title_text_is_drawn():
    surface = pygame.Surface((600, 1000))
    Quest().draw(surface)
    region = [
        _pixel(surface, (x, y))
        for x in range(150, 400)
        for y in range(200, 290)
    ]
    assert (0, 0, 0) in region
    assert _pixel(surface, (5, 250)) == PURPLE