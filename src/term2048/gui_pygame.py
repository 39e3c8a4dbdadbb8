from __future__ import annotations
from typing import Iterator, Optional

import pygame

from term2048.api import GameView
from term2048.errors import ExitSignal
from term2048.terminal import headline, tile_color


BG_COLOR = (250, 248, 239)
GRID_COLOR = (187, 173, 160)
EMPTY_COLOR = (205, 193, 180)
TILE_TEXT_COLOR_DARK = (119, 110, 101)
TILE_TEXT_COLOR_LIGHT = (249, 246, 242)

CELL_SIZE = 100
MARGIN = 15
HEADER_H = 90

KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_q: "q",
    pygame.K_ESCAPE: "q",
}


def key_name(key: int) -> Optional[str]:
    return KEY_NAMES.get(key)


def pygame_keys() -> Iterator[str]:
    """Blocking key source for PlayerController; closing the window reads as 'q'."""
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            yield "q"
        elif event.type == pygame.KEYDOWN:
            name = key_name(event.key)
            if name is not None:
                yield name


class PygameDisplay:
    def __init__(self, size: int, color_seed: int = 35, keep_keys: bool = False):
        pygame.init()
        pygame.display.set_caption("2048")
        self.size = size
        self.color_seed = color_seed
        # key presses are left queued only when pygame_keys() consumes them
        self.keep_keys = keep_keys
        board_pixels = MARGIN + size * (CELL_SIZE + MARGIN)
        self.width = board_pixels
        self.height = HEADER_H + board_pixels
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.font_big = pygame.font.SysFont("arial", 48, bold=True)
        self.font_mid = pygame.font.SysFont("arial", 28, bold=True)
        self.font_small = pygame.font.SysFont("arial", 16)

    def pump(self) -> None:
        """Service the window; raises ExitSignal once it has been closed."""
        if pygame.event.get(pygame.QUIT):
            raise ExitSignal()
        if not self.keep_keys:
            pygame.event.clear()

    def show(self, view: GameView) -> None:
        self.pump()

        self.screen.fill(BG_COLOR)
        info = self.font_small.render(headline(view), True, TILE_TEXT_COLOR_DARK)
        hint = self.font_small.render("Arrows: Move | Q/Esc: Quit", True, TILE_TEXT_COLOR_DARK)
        self.screen.blit(info, (MARGIN, MARGIN))
        self.screen.blit(hint, (MARGIN, HEADER_H - hint.get_height() - 8))

        pygame.draw.rect(self.screen, GRID_COLOR, pygame.Rect(0, HEADER_H, self.width, self.height - HEADER_H))
        for y, row in enumerate(view.tiles()):
            for x, tile in enumerate(row):
                left = MARGIN + x * (CELL_SIZE + MARGIN)
                top = HEADER_H + MARGIN + y * (CELL_SIZE + MARGIN)
                value = tile.value
                color = EMPTY_COLOR if value is None else tile_color(value, self.color_seed)
                pygame.draw.rect(self.screen, color, pygame.Rect(left, top, CELL_SIZE, CELL_SIZE), border_radius=6)
                if value is None:
                    continue
                # adaptive font size
                if value < 100:
                    font = self.font_big
                elif value < 1000:
                    font = self.font_mid
                else:
                    font = self.font_small
                text = font.render(str(value), True, TILE_TEXT_COLOR_LIGHT)
                self.screen.blit(text, (left + (CELL_SIZE - text.get_width()) // 2, top + (CELL_SIZE - text.get_height()) // 2))

        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
