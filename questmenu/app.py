"""The menu application: a bottom bar of buttons switching between pages."""

from __future__ import annotations

import argparse
import enum

import pygame

from questmenu.button import Button
from questmenu.quest import BLACK, Quest, _draw_text

SCREEN_SIZE = (600, 1000)
TARGET_FPS = 60
WINDOW_TITLE = "Button tutorial!"
DEFAULT_BUTTON_IMAGE = "Graphics/menu_button.png"
BUTTON_SCALE = 0.30
BUTTON_ROW_Y = 910

BLUE = (0, 121, 241)
YELLOW = (253, 249, 0)
GREEN = (0, 228, 48)
RED = (230, 41, 55)
ORANGE = (255, 161, 0)


class MenuState(enum.IntEnum):
    NONE = 0
    QUESTS = 1
    TASKS = 2
    STORY = 3
    HUNTING = 4
    COLLECTION = 5
    TENT = 6


_PAGES = {
    MenuState.TASKS: ("Tasks", (130, 200), BLUE),
    MenuState.STORY: ("Story", (150, 200), YELLOW),
    MenuState.HUNTING: ("Hunting", (110, 200), GREEN),
    MenuState.COLLECTION: ("Colection", (80, 200), RED),
    MenuState.TENT: ("Tent", (180, 200), ORANGE),
}

_BUTTON_X = {
    MenuState.QUESTS: 0,
    MenuState.TASKS: 100,
    MenuState.STORY: 200,
    MenuState.HUNTING: 300,
    MenuState.COLLECTION: 400,
    MenuState.TENT: 500,
}

_LABELS = (
    ("Quest", (6, 940), 30),
    ("Tasks", (104, 940), 30),
    ("Story", (206, 940), 30),
    ("Hunting", (306, 942), 25),
    ("Colection", (404, 945), 20),
    ("Tent", (513, 940), 30),
)


def select_menu_state(buttons, mouse_pos, mouse_pressed, current):
    """Return the state of the first pressed button, or ``current`` if none was pressed.

    ``buttons`` maps each state to its button, in priority order.
    """
    for state, button in buttons.items():
        if button.is_pressed(mouse_pos, mouse_pressed):
            return MenuState(state)
    return current


def draw_screen(surface, state, quest) -> None:
    """Draw the page for ``state``; the quest page is the default."""
    page = _PAGES.get(state)
    if page is None:
        quest.draw(surface)
        return
    title, position, background = page
    surface.fill(background)
    _draw_text(surface, title, position, 100, BLACK)


def _draw_menu_bar(surface, buttons) -> None:
    for button in buttons.values():
        button.draw(surface)
    for text, position, size in _LABELS:
        _draw_text(surface, text, position, size, BLACK)


def _should_close(event) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Menu with a bar of image buttons.")
    parser.add_argument(
        "--image",
        default=DEFAULT_BUTTON_IMAGE,
        help="image used for every menu button",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        buttons = {
            state: Button(args.image, (x, BUTTON_ROW_Y), BUTTON_SCALE)
            for state, x in _BUTTON_X.items()
        }
        quest = Quest()
        state = MenuState.NONE

        running = True
        while running:
            mouse_pressed = False
            for event in pygame.event.get():
                if _should_close(event):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    mouse_pressed = True
            if not running:
                break

            mouse_pos = pygame.mouse.get_pos()
            state = select_menu_state(buttons, mouse_pos, mouse_pressed, state)

            draw_screen(screen, state, quest)
            _draw_menu_bar(screen, buttons)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())