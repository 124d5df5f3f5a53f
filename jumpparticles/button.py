"""A clickable rectangular button with a centred label."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import pygame
from pygame.math import Vector2

BUTTON_COLOR = (200, 200, 200)
OUTLINE_COLOR = (170, 170, 170)
TEXT_COLOR = (0, 0, 0)
OUTLINE_THICKNESS = 2
LEFT_MOUSE_BUTTON = 1


class Button:
    """A labelled rectangle that runs a callback when left-clicked.

    The outline is drawn outside the rectangle and counts as part of it
    for clicks.
    """

    def __init__(
        self,
        text: str,
        position: Sequence[float],
        size: Sequence[float],
        font_size: int,
        on_click: Optional[Callable[[], None]] = None,
    ) -> None:
        self.text = text
        self.position = Vector2(position)
        self.size = Vector2(size)
        self.font_size = font_size
        self.on_click = on_click
        self.is_hovered = False

    @property
    def center(self) -> Vector2:
        """The point the label is centred on."""
        return self.position + self.size / 2.0

    def set_position(self, position: Sequence[float]) -> None:
        """Move the button so its top-left corner is at ``position``."""
        self.position = Vector2(position)

    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies on the button, outline included."""
        x, y = point
        left = self.position.x - OUTLINE_THICKNESS
        top = self.position.y - OUTLINE_THICKNESS
        right = self.position.x + self.size.x + OUTLINE_THICKNESS
        bottom = self.position.y + self.size.y + OUTLINE_THICKNESS
        return left <= x < right and top <= y < bottom

    def handle_click(self, point: Sequence[float], mouse_button: int) -> bool:
        """React to a mouse press at ``point``; return whether it was a click.

        The hover state follows the press position whatever the button.
        """
        self.is_hovered = self.contains(point)
        if self.is_hovered and mouse_button == LEFT_MOUSE_BUTTON:
            if self.on_click is not None:
                self.on_click()
            return True
        return False

    def draw(self, surface: pygame.Surface, font) -> None:
        """Draw the outline, the body and the label rendered with ``font``."""
        body = pygame.Rect(
            int(self.position.x), int(self.position.y), int(self.size.x), int(self.size.y)
        )
        pygame.draw.rect(
            surface, OUTLINE_COLOR, body.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS)
        )
        pygame.draw.rect(surface, BUTTON_COLOR, body)

        label = font.render(self.text, True, TEXT_COLOR)
        center = self.center
        surface.blit(label, label.get_rect(center=(int(center.x), int(center.y))))