from __future__ import annotations
import os
import select
import sys
from typing import Iterator, Optional, TextIO, Tuple

import numpy as np

from term2048.api import GameView
from term2048.grid import Tile


TILE_LENGTH = 7
TILE_HEIGHT = 3

# frame pieces
TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = "┌", "┐", "└", "┘"
CROSS, HORIZONTAL, VERTICAL = "┼", "─", "│"
LEFT_T, RIGHT_T, BOTTOM_T, TOP_T = "├", "┤", "┴", "┬"

ESCAPE_KEYS = {
    "\x1b": "escape",
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
}
CONTROL_KEYS = {
    "\x03": "ctrl-c",
    "\x04": "ctrl-d",
}
# seconds to wait for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05


def clear_term(stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write("\x1b[2J\x1b[1;1H")
    stream.flush()


def tile_color(value: int, color_seed: int) -> Tuple[int, int, int]:
    """Stable RGB background for a tile value; the seed shifts the whole palette."""
    frac_a, frac_b = np.random.default_rng(value + color_seed).random(2)
    remaining = 255.0
    r = min(remaining * frac_a, 150.0)
    remaining -= r
    g = min(remaining * frac_b, 150.0)
    remaining -= g
    return int(r), int(g), int(remaining)


def _pad_both(text: str, length: int) -> str:
    while len(text) < length:
        text = f" {text} "
    return text[:length]


class TileDisplayer:
    def __init__(self, color_seed: int = 35):
        self.color_seed = color_seed

    def display(self, tile: Tile) -> str:
        if tile.value is None:
            return "\n".join([" " * TILE_LENGTH] * TILE_HEIGHT)
        lines = ["┌─   ─┐", _pad_both(str(tile.value), TILE_LENGTH), "└─   ─┘"]
        r, g, b = tile_color(tile.value, self.color_seed)
        return "\n".join(f"\x1b[48;2;{r};{g};{b}m{line}\x1b[49m" for line in lines)


class GridDisplayer:
    """Renders a grid as a box-drawing frame of TILE_LENGTH x TILE_HEIGHT cells."""

    def __init__(self, color_seed: int = 35):
        self.tile_displayer = TileDisplayer(color_seed)

    def display(self, view: GameView) -> str:
        rows = []
        for row in view.tiles():
            cells = [self.tile_displayer.display(tile).split("\n") for tile in row]
            lines = [VERTICAL + VERTICAL.join(cell[i] for cell in cells) + VERTICAL for i in range(TILE_HEIGHT)]
            rows.append("\n".join(lines))
        between = "\n" + self._rule(view.size, LEFT_T, CROSS, RIGHT_T) + "\n"
        return "\n".join([
            self._rule(view.size, TOP_LEFT, TOP_T, TOP_RIGHT),
            between.join(rows),
            self._rule(view.size, BOTTOM_LEFT, BOTTOM_T, BOTTOM_RIGHT),
        ])

    @staticmethod
    def _rule(size: int, left: str, joint: str, right: str) -> str:
        return left + joint.join(HORIZONTAL * TILE_LENGTH for _ in range(size)) + right


def headline(view: GameView) -> str:
    return (
        f"score: {view.score:>12} | "
        f"biggest tile: {view.biggest_value():>12} | "
        f"turn: {view.turn_index:>12}"
    )


class TerminalDisplay:
    def __init__(self, color_seed: int = 35, clear: bool = True, stream: Optional[TextIO] = None):
        self.grid_displayer = GridDisplayer(color_seed)
        self.clear = clear
        self.stream = stream

    def show(self, view: GameView) -> None:
        stream = self.stream or sys.stdout
        if self.clear:
            clear_term(stream)
        stream.write(headline(view) + "\n")
        stream.write(self.grid_displayer.display(view) + "\n")
        stream.flush()

    def pump(self) -> None:
        pass


def _read_key(stream: TextIO) -> str:
    ch = stream.read(1)
    # arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        ch += stream.read(2)
    return ch


def _input_pending(fd: int, timeout: float = ESCAPE_TIMEOUT) -> bool:
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


def _read_tty_key(fd: int) -> str:
    # unbuffered, so select() sees the bytes still queued behind ESC
    raw = os.read(fd, 1)
    if raw == b"\x1b" and _input_pending(fd):
        raw += os.read(fd, 2)
    return raw.decode("utf-8", errors="replace")


def decode_key(raw: str) -> str:
    if raw in ESCAPE_KEYS:
        return ESCAPE_KEYS[raw]
    if raw in CONTROL_KEYS:
        return CONTROL_KEYS[raw]
    return raw.lower()


def read_keys(stream: Optional[TextIO] = None) -> Iterator[str]:
    """
    Lazily yield key names read from ``stream`` (stdin by default).

    A TTY is put in raw mode for each read and restored afterwards; any other
    stream is read as-is. A lone Esc on a TTY decodes to ``"escape"`` once no
    further byte follows within ESCAPE_TIMEOUT. The generator ends when the
    stream is exhausted.
    """
    stream = stream or sys.stdin
    while True:
        if stream.isatty():
            import termios
            import tty

            fd = stream.fileno()
            old_settings = termios.tcgetattr(fd)
            try:
                tty.setraw(fd)
                raw = _read_tty_key(fd)
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        else:
            raw = _read_key(stream)
        if not raw:
            return
        yield decode_key(raw)
