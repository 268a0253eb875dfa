"""The quest page."""

from __future__ import annotations

import functools

import pygame

PURPLE = (200, 122, 255)
BLACK = (0, 0, 0)
QUEST_PANEL_COLOR = (243, 216, 63)
QUEST_PANEL_RECT = (100, 400, 400, 150)


@functools.lru_cache(maxsize=None)
def _font(size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(surface, text, position, size, color) -> None:
    """Render ``text`` with the default font, top-left at ``position``."""
    surface.blit(_font(size).render(text, True, color), position)


class Quest:
    """Draws the quest page: title and a highlighted panel."""

    def draw(self, surface) -> None:
        surface.fill(PURPLE)
        _draw_text(surface, "Quest", (150, 200), 100, BLACK)
        pygame.draw.rect(surface, QUEST_PANEL_COLOR, QUEST_PANEL_RECT)