"""Draw the CHIP-8 framebuffer onto a pygame surface."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from chip8.chip import SCREEN_HEIGHT, SCREEN_WIDTH

ON_COLOR = (1.0, 0.5, 1.0)
OFF_COLOR = (0.0, 0.0, 0.0)


def _shade(value: int) -> tuple[int, int, int]:
    """Blend from the off colour to the on colour by a pixel's intensity."""
    p = value / 255
    r, g, b = (
        int((off + (on - off) * p) * 255 + 0.5)
        for on, off in zip(ON_COLOR, OFF_COLOR)
    )
    return r, g, b


_PALETTE = [_shade(value) for value in range(256)]
ON_RGB = _PALETTE[255]
OFF_RGB = _PALETTE[0]


def framebuffer_colors(framebuffer: Sequence[int]) -> list[tuple[int, int, int]]:
    """Map each framebuffer intensity (0-255) to an RGB colour, in row order."""
    return [_PALETTE[value] for value in framebuffer]


class Renderer:
    """Scales the 64x32 framebuffer up to fill a target surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.size = surface.get_size()

    def draw(self, framebuffer: Sequence[int]) -> None:
        """Paint the framebuffer onto the surface with nearest-neighbour scaling."""
        expected = SCREEN_WIDTH * SCREEN_HEIGHT
        if len(framebuffer) != expected:
            raise ValueError(
                f"framebuffer holds {len(framebuffer)} pixels, expected {expected}"
            )
        pixels = bytes(
            channel for colour in framebuffer_colors(framebuffer) for channel in colour
        )
        screen = pygame.image.frombuffer(pixels, (SCREEN_WIDTH, SCREEN_HEIGHT), "RGB")
        self.surface.fill(OFF_RGB)
        self.surface.blit(pygame.transform.scale(screen, self.size), (0, 0))