# chip8

A small CHIP-8 interpreter. It has 4 KiB of memory, sixteen 8-bit
registers, an index register, a call stack sixteen entries deep, delay
and sound timers, and a 64×32 monochrome framebuffer. The framebuffer is
drawn in a pygame window scaled to 640×320.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a ROM

```
chip8 roms/2-ibm-logo.ch8
```

The ROM argument is optional. Without it, `roms/2-ibm-logo.ch8` is used.
`--frames N` stops the program after `N` frames.

The program opens a 640×320 window and loads the ROM at address `0x200`.
If the ROM cannot be read or is too large, it logs the error and keeps
running. It then fills the framebuffer with a checkerboard. After that,
each frame runs ten instructions, handles window events and redraws the
screen. The target rate is 1000 frames per second. Close the window or
press Escape to quit. The command exits with status 1 if pygame reports
an error, and 0 otherwise.

## Using the interpreter from Python

```python
from chip8.chip import Chip8

machine = Chip8()
machine.load_bytes(bytes([0x60, 0x2A]))   # V0 = 0x2A
machine.step()
assert machine.v[0] == 0x2A
```

### `chip8.chip`

`Chip8` holds the machine state:

- `v`: the sixteen registers.
- `i`: the index register.
- `pc`: the program counter.
- `memory`: a 4096-byte `bytearray`.
- `stack`: the call stack; `sp` is its depth.
- `delay_timer` and `sound_timer`.
- `framebuffer`: 64×32 bytes, where each pixel is 0 or 255.
- `keys`: sixteen key flags.

Its methods:

- `load_rom(path)` reads a ROM file.
- `load_bytes(data)` takes the program bytes directly. Both copy the
  program to `0x200` and set `pc` there. Empty data changes nothing. A
  program longer than 3584 bytes raises `RomTooLargeError`, which is a
  `ValueError`.
- `step()` fetches and runs one instruction. A call with a full stack,
  or a return with an empty one, raises `IndexError`.
- `update_timers(now_ms)` lowers each non-zero timer by one if at least
  16 ms have passed since the last tick.
- `fill_test_pattern()` fills the framebuffer with a checkerboard.

### `chip8.render`

- `framebuffer_colors(framebuffer)` maps pixel intensities (0–255) to RGB
  colours, in row order. Intensity 0 is black and 255 is pink-violet.
- `Renderer(surface).draw(framebuffer)` paints a 64×32 framebuffer onto a
  pygame surface with nearest-neighbour scaling. A framebuffer of any
  other size raises `ValueError`.

### `chip8.input`

- `InputState` records the left and right mouse buttons, the mouse
  position, the held scancodes and a `running` flag. Quit events and
  Escape clear `running`.
- `poll_input(state, events=None)` applies the given events to the state,
  or the pending pygame events if none are given, and returns the state.

### `chip8.app`

- `run(rom_path, max_frames)` runs the whole window loop and returns the
  `Chip8` it used.
- `main(argv)` is the command-line entry point.

## What it does not do

- Only part of the instruction set runs:
  - `00E0`, `00EE`
  - `1NNN` to `7XNN`
  - `8XY0` to `8XY7` and `8XYE`
  - `9XY0`, `ANNN`, `BNNN`, `DXYN`
  - `FX1E`, `FX55`, `FX65`

  Random numbers (`CXNN`), key skips (`EX9E`/`EXA1`), and the other `FX`
  instructions (timers, key wait, fonts, BCD) do nothing.
- Keyboard input is not connected to the machine's keypad. `Chip8.keys`
  is never set from `InputState`.
- The window loop does not call `update_timers`, so the timers do not run
  during `run`.
- There is no sound. The sound timer only counts down.