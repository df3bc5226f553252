# ui/board.py
import pygame

from core.settings import (
    CASTLE_COLOR, ENEMY_COLOR, GRID_LINE_COLOR, OBSTACLE_COLOR, OBSTACLE_SCALE,
)
from world.grid import CellKind


class BoardRenderer:
    """
    Draws the play area from a SessionSnapshot:
    - cell outlines
    - castle column filled
    - obstacles as a centred square at OBSTACLE_SCALE of a cell, with a
      simple bevel so they read as blocks
    - enemies as circles
    """

    def draw(self, surf: pygame.Surface, snap):
        size = snap.cell_size
        obstacle = int(size * OBSTACLE_SCALE)
        inset = (size - obstacle) // 2

        for y, row in enumerate(snap.cells):
            for x, kind in enumerate(row):
                r = pygame.Rect(x * size, y * size, size, size)

                if kind == CellKind.GOAL:
                    pygame.draw.rect(surf, CASTLE_COLOR, r)
                elif kind == CellKind.OBSTACLE:
                    block = pygame.Rect(r.left + inset, r.top + inset, obstacle, obstacle)
                    self._draw_block(surf, block, pygame.Color(*OBSTACLE_COLOR))

                pygame.draw.rect(surf, GRID_LINE_COLOR, r, 2)

        for e in snap.enemies:
            center = (int(e.pos[0]), int(e.pos[1]))
            pygame.draw.circle(surf, ENEMY_COLOR, center, e.radius)

    def _draw_block(self, surf, rect, base):
        pygame.draw.rect(surf, base, rect)

        hi = _tint(base, 40)
        lo = _tint(base, -40)
        pygame.draw.line(surf, hi, rect.topleft, (rect.right - 1, rect.top), 2)
        pygame.draw.line(surf, hi, rect.topleft, (rect.left, rect.bottom - 1), 2)
        pygame.draw.line(surf, lo, (rect.left, rect.bottom - 1), (rect.right - 1, rect.bottom - 1), 2)
        pygame.draw.line(surf, lo, (rect.right - 1, rect.top), (rect.right - 1, rect.bottom - 1), 2)


def _clamp_u8(v):
    return 0 if v < 0 else 255 if v > 255 else int(v)


def _tint(c, delta):
    return pygame.Color(_clamp_u8(c.r + delta), _clamp_u8(c.g + delta), _clamp_u8(c.b + delta), 255)
