# framekit

Drawing into an in-memory linear frame buffer, packed pixel colours, ANSI
colour escape sequences, and the small binary record types of a naming
service. Pure Python, no dependencies.

## Modules

- `framekit.color`: the immutable `Color` dataclass (`red`, `green`, `blue`,
  `alpha`, each 0..255; alpha defaults to 255).
  - Decoding: `Color.from_rgb(value, bpp)` for 15, 16, 24 or 32 bits
    (other depths raise `ValueError`), and `from_rgb_32`, `from_rgb_24`,
    `from_rgb_16`, `from_rgb_15`. Only the 32-bit form carries alpha; the
    others decode with alpha 0.
  - Encoding: `rgb_32()`, `rgb_24()`, `rgb_16()`, `rgb_15()`.
  - `bright()` / `dim()` shift every channel by `BRIGHTNESS_SHIFT` (85),
    saturating; `with_alpha(alpha)`; `blend(color)` composites `color` over
    this one.
  - Constants: `INVISIBLE`, `BLACK`, `RED`, `GREEN`, `YELLOW`, `BROWN`,
    `BLUE`, `MAGENTA`, `CYAN`, `WHITE`, `ACCENT_BLUE`, `ACCENT_GREEN`.
- `framekit.ansi`: escape-sequence constants (`RESET`,
  `FOREGROUND_*`, `BACKGROUND_*`, `ESCAPE_SEQUENCE_START`), the enums
  `Color8`, `GraphicRendition` and `Key`, and the functions
  `fg_8bit_color(index)`, `bg_8bit_color(index)` (index 0..255, otherwise
  `ValueError`), `fg_24bit_color(color)` and `bg_24bit_color(color)`.
- `framekit.palette`: the 256-entry terminal palette as `COLOR_TABLE_256`
  (16 ANSI colours, a 6x6x6 cube built from `CUBE_LEVELS`, and a grayscale
  ramp from `GRAYSCALE_LEVELS`), with `color_256(index)` for lookup.
- `framekit.lfb`: `LinearFrameBuffer(buffer, pitch, width, height, bpp)`
  over any writable buffer (such as a `bytearray`) of at least
  `pitch * height` bytes.
  - `draw_pixel(x, y, color)` ignores off-screen pixels and fully
    transparent colours, and blends translucent ones with what is there.
  - `read_pixel(x, y)` raises `IndexError` outside the buffer.
  - `fill_rect(x, y, width, height, color)` clips to the buffer.
  - `clear()` zeroes the visible area; `scroll_up(lines)` moves rows up and
    blanks the rows freed below.
  - Depths other than 15, 16, 24 and 32 may be created, but drawing to them
    raises `RuntimeError`.
- `framekit.buffered_lfb`: `BufferedFrameBuffer(target)` keeps an
  off-screen `lfb` of the same geometry; `flush_lines(start, count)` and
  `flush()` copy rows to the target (`direct_lfb`). Rows outside the buffer
  raise `ValueError`.
- `framekit.results`: the `Errno` codes (unknown negative codes map to
  `Errno.EUNKN`), the `SyscallError` exception, `result_from_code(code)`
  (returns non-negative codes, raises `SyscallError` for negative ones) and
  `code_from_result(result)` for the reverse direction.
- `framekit.naming`: `OpenOptions`, `SeekOrigin` (unknown values fall back
  to `START`, also via `SeekOrigin.from_primitive`), `FileType`, `DirEntry`
  with `DirEntry.from_dirent(raw)`, and `RawDirent`, a 264-byte record (an
  8-byte little-endian type and a 256-byte NUL-terminated name) with
  `pack()` and `RawDirent.unpack(data)`. C-string helpers: `strlen(data)`
  and `decode_c_string(data)`, which raises `SyscallError(Errno.EBADSTR)`
  for missing, unterminated or invalid UTF-8 strings.

## Install

```
pip install .
```

## Example

```python
from framekit.color import Color
from framekit.lfb import LinearFrameBuffer
from framekit.buffered_lfb import BufferedFrameBuffer

width, height, bpp = 64, 32, 32
screen = LinearFrameBuffer(bytearray(width * 4 * height), width * 4, width, height, bpp)
back = BufferedFrameBuffer(screen)

red = Color(170, 0, 0, 255)
back.lfb.fill_rect(4, 4, 10, 10, red)
back.flush()

assert screen.read_pixel(5, 5).rgb_32() == red.rgb_32()
```

```python
from framekit.ansi import RESET, fg_24bit_color
from framekit.palette import color_256

print(fg_24bit_color(color_256(196)) + "hello" + RESET)
```

```python
from framekit.naming import DirEntry, FileType, RawDirent

record = RawDirent(FileType.REGULAR, b"notes.txt").pack()
entry = DirEntry.from_dirent(RawDirent.unpack(record))
assert entry == DirEntry(FileType.REGULAR, "notes.txt")
```

## What it does not do

- No text rendering: there is no font and no way to draw characters or
  strings into a frame buffer. `DEFAULT_CHAR_WIDTH` and
  `DEFAULT_CHAR_HEIGHT` in `framekit.lfb` are only the cell size constants.
- No access to real display hardware: frame buffers are ordinary memory.
- No file system or naming service: `framekit.naming` and
  `framekit.results` only describe the records, flags and error codes such
  a service exchanges; nothing opens, reads or lists files.
- No command-line program.

## Tests

```
pip install .[test]
pytest
```