"""Window setup and the main emulation loop."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from os import PathLike

import pygame

from chip8.chip import Chip8, RomTooLargeError
from chip8.input import InputState, poll_input
from chip8.render import Renderer

log = logging.getLogger(__name__)

WINDOW_TITLE = "chip8"
WINDOW_SIZE = (640, 320)
DEFAULT_ROM = "roms/2-ibm-logo.ch8"
FRAMES_PER_SECOND = 1000
STEPS_PER_FRAME = 10


def run(
    rom_path: str | PathLike[str] = DEFAULT_ROM, max_frames: int | None = None
) -> Chip8:
    """Open the window, load the ROM and run until quit or max_frames frames."""
    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)

        chip = Chip8()
        try:
            chip.load_rom(rom_path)
        except (OSError, RomTooLargeError) as exc:
            log.error("could not load ROM %s: %s", rom_path, exc)

        renderer = Renderer(window)
        chip.fill_test_pattern()
        state = InputState()
        frames = 0
        last = time.perf_counter()

        while state.running and (max_frames is None or frames < max_frames):
            now = time.perf_counter()
            dt = now - last
            last = now

            for _ in range(STEPS_PER_FRAME):
                chip.step()

            poll_input(state)
            renderer.draw(chip.framebuffer)
            pygame.display.flip()
            frames += 1

            delay = 1.0 / FRAMES_PER_SECOND - dt
            pygame.time.wait(int(delay * 1000) if delay > 0 else 1)
        return chip
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="chip8", description="CHIP-8 emulator")
    parser.add_argument("rom", nargs="?", default=DEFAULT_ROM, help="ROM file to run")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    try:
        run(args.rom, args.frames)
    except pygame.error as exc:
        print(f"chip8: {exc}", file=sys.stderr)
        return 1
    return 0