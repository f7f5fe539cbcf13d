# mxterm

`mxterm` holds the building blocks of a terminal emulator: the pieces
that interpret what a program writes to a terminal, the grid those
pieces work on, and the byte sequences a terminal sends back when keys
are pressed.

## Modules

- `mxterm.cells` – the grid: `XY`, `Cell`, `Row`, and `make_cells`,
  `make_row`, `make_screen` to build blank rows and screens.
  `set_element_xy` / `get_element_xy` pack and unpack a cell's position
  inside an embedded element (each ordinate at most 32767; larger values
  raise `ValueError`).
- `mxterm.motion` – `MotionMixin`: cursor movement, line feed and
  reverse line feed, scrolling regions (`ScrollRegion`), scrolling up
  and down, inserting and deleting characters and lines, and erasing in
  the display and in the line.
- `mxterm.controls` – `ControlMixin.read_char` interprets C0 control
  characters and `ESC` sequences: character set designation and
  shifts, cursor save/restore, index, next line, tab set, reverse index,
  DECALN, keypad modes, VT52 mode (`VtMode`), OSC window titles, DCS and
  PM strings and tmux window renames.
- `mxterm.csi` – `CsiMixin.parse_csi` reads and dispatches `ESC [`
  sequences, including DEC private modes (alternative buffer, origin
  mode, auto-wrap, cursor visibility, 80/132 columns) and device status
  reports. `multiply_n` and `is_csi_terminator` are the parameter
  helpers it uses.
- `mxterm.sgr` – `Sgr` (attribute flags `SgrFlag`, foreground and
  background `Colour`), `apply_sgr` for `CSI … m` parameters with 16,
  256 (`palette_256`) and 24-bit colours (`enhanced_colour`).
- `mxterm.charset` – the national replacement sets and the DEC special
  graphics set; `character_set(final)` returns the set for an SCS final
  character, or `None` for US-ASCII.
- `mxterm.keycodes` – `Ascii`, `KeyCode`, `KeyboardMode` and
  `Modifier`, with `modifier_ansi_code`, `modifier_tmux_code` and
  `special_case_sequence`.
- `mxterm.keyboard` – key presses to bytes.
- `mxterm.config` – settings, version and child environment.
- `mxterm.cli` – the `mxterm` command.

## Keyboard sequences

```python
from mxterm.keyboard import escape_sequence
from mxterm.keycodes import KeyboardMode, KeyCode, Modifier

escape_sequence(KeyboardMode.NORMAL, KeyCode.F5, Modifier.SHIFT)
# b'\x1b[15;2~'
```

`escape_sequence` covers normal, application, VT52, VT220 and tmux
client modes. Plain character codes below 256 are sent as they are, and
Ctrl with a lower-case letter gives the matching control character.
`lookup_sequence(mode, key)` looks a key up in one mode's table, falling
back to the normal table, and `octal_escape(data)` writes bytes as
`\ooo` escapes.

## Configuration

`default_config()` returns a `Config` of built-in settings (sections
`ShellConfig`, `TerminalConfig`, `TypeFaceConfig`, `WindowConfig`,
`TmuxConfig`). `load_config(text)` reads YAML over those defaults, using
the keys `Shell`, `Terminal`, `Window` and `Tmux`; unknown keys and
values of the wrong type raise `ValueError`.

`child_environment(config, base)` copies `base` (or the process
environment), removes `TMUX`, `TERM` and `TERM_PROGRAM`, and sets
`MXTERM=true`, `MXTERM_VERSION`, `TERM=xterm-256color` and
`TERM_PROGRAM=mxterm`, plus `MXTERM_TMUX=true` when tmux is enabled.
`version()` returns `0.3.2010`.

## Command line

The `mxterm` command prints the APC sequence that asks a supporting
terminal to show an image inline:

```
mxterm --image picture.png
```

When `SSH_TTY` is set the file is read and sent as base64; otherwise
only its name is sent. An unreadable file prints the error and exits
with status 1. `image_sequence(path, env)` and `apc_params(params)`
build the same text from Python.

## What this package does not do

The mixins in `mxterm.motion`, `mxterm.controls` and `mxterm.csi` expect
a host class that owns the screen buffers, cursor, input stream, tab
stops, renderer and PTY; no such assembled terminal class is included,
so there is nothing here that takes a stream of output and keeps a
screen by itself. The package also opens no pseudo-terminal, starts no
shell, draws no window, and does not act on APC element commands
(those are reported as unknown).

## Installation

```
pip install .
pip install ".[test]"   # with pytest
```