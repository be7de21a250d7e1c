"""Keyboard and mouse state gathered from pygame events."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import pygame

KEY_SLOTS = 256


@dataclass
class InputState:
    """Mouse buttons and position, held keys by scancode, and the run flag."""

    left: bool = False
    right: bool = False
    keys: set[int] = field(default_factory=set)
    mouse_x: int = 0
    mouse_y: int = 0
    running: bool = True

    def handle(self, event: pygame.event.Event) -> None:
        """Update the state from one event."""
        match event.type:
            case pygame.QUIT:
                self.running = False
            case pygame.MOUSEMOTION:
                x, y = event.pos
                self.mouse_x, self.mouse_y = int(x), int(y)
            case pygame.MOUSEBUTTONDOWN:
                self._set_button(event.button, True)
            case pygame.MOUSEBUTTONUP:
                self._set_button(event.button, False)
            case pygame.KEYDOWN:
                if event.scancode == pygame.KSCAN_ESCAPE:
                    self.running = False
                elif 0 <= event.scancode < KEY_SLOTS:
                    self.keys.add(event.scancode)
            case pygame.KEYUP:
                self.keys.discard(event.scancode)

    def _set_button(self, button: int, pressed: bool) -> None:
        if button == pygame.BUTTON_LEFT:
            self.left = pressed
        elif button == pygame.BUTTON_RIGHT:
            self.right = pressed


def poll_input(
    state: InputState, events: Iterable[pygame.event.Event] | None = None
) -> InputState:
    """Apply pending events (the pygame queue by default) to the state and return it."""
    for event in pygame.event.get() if events is None else events:
        state.handle(event)
    return state