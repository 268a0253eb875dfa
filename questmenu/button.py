"""A clickable image button."""

from __future__ import annotations

import os
from pathlib import Path

import pygame


class Button:
    """An image loaded from disk, scaled, and placed at a fixed position."""

    def __init__(self, image_path, position, scale):
        path = Path(os.fspath(image_path))
        if not path.is_file():
            raise FileNotFoundError(f"button image not found: {path}")
        if scale < 0:
            raise ValueError(f"scale must not be negative, got {scale}")

        original = pygame.image.load(str(path))
        width = int(original.get_width() * scale)
        height = int(original.get_height() * scale)
        self.image = pygame.transform.scale(original, (width, height))
        self.position = pygame.Vector2(position)

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    def draw(self, surface) -> None:
        """Blit the button image onto ``surface`` at its position."""
        surface.blit(self.image, (self.position.x, self.position.y))

    def contains(self, point) -> bool:
        """Whether ``point`` lies inside the button (right and bottom edges excluded)."""
        x, y = point
        left, top = self.position.x, self.position.y
        return left <= x < left + self.width and top <= y < top + self.height

    def is_pressed(self, mouse_pos, mouse_pressed) -> bool:
        """True when the mouse was pressed while over the button."""
        return bool(mouse_pressed) and self.contains(mouse_pos)