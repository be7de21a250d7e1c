"""CHIP-8 machine state and instruction interpreter."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

log = logging.getLogger(__name__)

MEMORY_SIZE = 4096
PROGRAM_START = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - PROGRAM_START
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
REGISTER_COUNT = 16
STACK_DEPTH = 16
KEY_COUNT = 16
PIXEL_ON = 255
PIXEL_OFF = 0
TIMER_INTERVAL_MS = 1000 // 60


class RomTooLargeError(ValueError):
    """Raised when a ROM does not fit in program memory."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"ROM is {size} bytes; at most {MAX_ROM_SIZE} bytes fit in memory"
        )
        self.size = size


class Chip8:
    """A CHIP-8 machine: registers, memory, stack, timers and framebuffer."""

    def __init__(self) -> None:
        self.v = [0] * REGISTER_COUNT
        self.i = 0
        self.pc = 0
        self.memory = bytearray(MEMORY_SIZE)
        self.delay_timer = 0
        self.sound_timer = 0
        self.stack: list[int] = []
        self.framebuffer = bytearray(SCREEN_WIDTH * SCREEN_HEIGHT)
        self.keys = [False] * KEY_COUNT
        self._last_timer_tick = 0

    @property
    def sp(self) -> int:
        """Current stack depth."""
        return len(self.stack)

    def fill_test_pattern(self) -> None:
        """Fill the framebuffer with a checkerboard."""
        for row in range(SCREEN_HEIGHT):
            for col in range(SCREEN_WIDTH):
                lit = (row + col) & 1
                self.framebuffer[row * SCREEN_WIDTH + col] = PIXEL_ON if lit else PIXEL_OFF

    def load_rom(self, path: str | PathLike[str]) -> None:
        """Load a ROM file into program memory and jump to its start."""
        self.load_bytes(Path(path).read_bytes())

    def load_bytes(self, data: bytes) -> None:
        """Copy a program into memory at the program start address."""
        if len(data) > MAX_ROM_SIZE:
            raise RomTooLargeError(len(data))
        if not data:
            return
        self.memory[PROGRAM_START:PROGRAM_START + len(data)] = data
        self.pc = PROGRAM_START

    def update_timers(self, now_ms: int) -> None:
        """Count the timers down once a 60 Hz tick has passed since the last one."""
        if now_ms - self._last_timer_tick < TIMER_INTERVAL_MS:
            return
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1
        self._last_timer_tick = now_ms

    def _push(self, address: int) -> None:
        if len(self.stack) >= STACK_DEPTH:
            raise IndexError("CHIP-8 stack overflow")
        self.stack.append(address)

    def _pop(self) -> int:
        if not self.stack:
            raise IndexError("return with an empty CHIP-8 stack")
        return self.stack.pop()

    def step(self) -> None:
        """Fetch, decode and execute one instruction."""
        opcode = self.memory[self.pc] << 8 | self.memory[self.pc + 1]
        self.pc = (self.pc + 2) & 0xFFFF
        log.debug("opcode: %04X, PC=%04X", opcode, self.pc)

        x = (opcode & 0x0F00) >> 8
        y = (opcode & 0x00F0) >> 4
        n = opcode & 0x000F
        nn = opcode & 0x00FF
        nnn = opcode & 0x0FFF
        v = self.v

        match opcode & 0xF000:
            case 0x0000:
                if nn == 0xE0:
                    self.framebuffer[:] = bytes(len(self.framebuffer))
                elif nn == 0xEE:
                    self.pc = self._pop()
            case 0x1000:
                self.pc = nnn
            case 0x2000:
                self._push(self.pc)
                self.pc = nnn
            case 0x3000:
                if v[x] == nn:
                    self._skip()
            case 0x4000:
                if v[x] != nn:
                    self._skip()
            case 0x5000:
                if n == 0 and v[x] == v[y]:
                    self._skip()
            case 0x6000:
                v[x] = nn
            case 0x7000:
                v[x] = (v[x] + nn) & 0xFF
            case 0x8000:
                self._arithmetic(n, x, y)
            case 0x9000:
                if n == 0 and v[x] != v[y]:
                    self._skip()
            case 0xA000:
                self.i = nnn
            case 0xB000:
                self.pc = nnn + v[0]
            case 0xD000:
                self._draw(x, y, n)
            case 0xF000:
                if nn == 0x1E:
                    self.i = (self.i + v[x]) & 0xFFFF
                elif nn == 0x55:
                    for offset in range(x + 1):
                        self.memory[self.i + offset] = v[offset]
                elif nn == 0x65:
                    for offset in range(x + 1):
                        v[offset] = self.memory[self.i + offset]
            case 0xC000 | 0xE000:
                pass
            case _:
                log.warning("unknown opcode: %04X at PC=%04X", opcode, self.pc - 2)

    def _skip(self) -> None:
        self.pc = (self.pc + 2) & 0xFFFF

    def _arithmetic(self, op: int, x: int, y: int) -> None:
        v = self.v
        match op:
            case 0x0:
                v[x] = v[y]
            case 0x1:
                v[x] |= v[y]
            case 0x2:
                v[x] &= v[y]
            case 0x3:
                v[x] ^= v[y]
            case 0x4:
                total = v[x] + v[y]
                v[x] = total & 0xFF
                v[0xF] = int(total > 0xFF)
            case 0x5:
                v[0xF] = int(v[x] >= v[y])
                v[x] = (v[x] - v[y]) & 0xFF
            case 0x6:
                v[0xF] = v[x] & 0x1
                v[x] >>= 1
            case 0x7:
                v[0xF] = int(v[y] >= v[x])
                v[x] = (v[y] - v[x]) & 0xFF
            case 0xE:
                v[0xF] = (v[x] & 0x80) >> 7
                v[x] = (v[x] << 1) & 0xFF

    def _draw(self, x: int, y: int, height: int) -> None:
        v = self.v
        v[0xF] = 0
        for row in range(height):
            sprite = self.memory[self.i + row]
            for bit in range(8):
                if not (sprite >> (7 - bit)) & 1:
                    continue
                px = (v[x] + bit) % SCREEN_WIDTH
                py = (v[y] + row) % SCREEN_HEIGHT
                index = py * SCREEN_WIDTH + px
                if self.framebuffer[index] == PIXEL_ON:
                    v[0xF] = 1
                self.framebuffer[index] ^= PIXEL_ON