import pygame
import pytest

from chip8.chip import PIXEL_ON, SCREEN_HEIGHT, SCREEN_WIDTH, Chip8
from chip8.render import OFF_RGB, ON_RGB, Renderer, framebuffer_colors


def _blank():
    return bytearray(SCREEN_WIDTH * SCREEN_HEIGHT)


def test_off_pixel_is_black():
    assert framebuffer_colors([0]) == [(0, 0, 0)]


def test_on_pixel_uses_on_colour():
    colours = framebuffer_colors([PIXEL_ON])
    assert colours == [ON_RGB]
    assert ON_RGB[0] == 255 and ON_RGB[2] == 255


def test_colours_preserve_length_and_order():
    fb = _blank()
    fb[3] = PIXEL_ON
    colours = framebuffer_colors(fb)
    assert len(colours) == len(fb)
    assert colours[3] == ON_RGB
    assert colours[2] == OFF_RGB


def test_intensity_is_monotonic():
    colours = framebuffer_colors(range(256))
    for earlier, later in zip(colours, colours[1:]):
        assert all(a <= b for a, b in zip(earlier, later))


def test_draw_scales_pixels_to_surface():
    surface = pygame.Surface((SCREEN_WIDTH * 10, SCREEN_HEIGHT * 10))
    fb = _blank()
    fb[0] = PIXEL_ON
    Renderer(surface).draw(fb)
    assert tuple(surface.get_at((5, 5)))[:3] == ON_RGB
    assert tuple(surface.get_at((9, 9)))[:3] == ON_RGB
    assert tuple(surface.get_at((15, 5)))[:3] == OFF_RGB
    assert tuple(surface.get_at((5, 15)))[:3] == OFF_RGB


def test_draw_keeps_top_row_at_top():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    fb = _blank()
    fb[SCREEN_WIDTH * (SCREEN_HEIGHT - 1)] = PIXEL_ON
    Renderer(surface).draw(fb)
    assert tuple(surface.get_at((0, SCREEN_HEIGHT - 1)))[:3] == ON_RGB
    assert tuple(surface.get_at((0, 0)))[:3] == OFF_RGB


def test_draw_checkerboard():
    chip = Chip8()
    chip.fill_test_pattern()
    surface = pygame.Surface((SCREEN_WIDTH * 2, SCREEN_HEIGHT * 2))
    Renderer(surface).draw(chip.framebuffer)
    for row in range(SCREEN_HEIGHT):
        for col in range(SCREEN_WIDTH):
            expected = ON_RGB if (row + col) & 1 else OFF_RGB
            assert tuple(surface.get_at((col * 2, row * 2)))[:3] == expected


def test_draw_rejects_wrong_size():
    surface = pygame.Surface((64, 32))
    with pytest.raises(ValueError):
        Renderer(surface).draw(bytearray(10))