# ui/hud.py
import pygame

from core.settings import HUD_COLOR, LOSE_COLOR, PANEL_COLOR, PANEL_WIDTH, WIN_COLOR
from core.utils import clamp


class HUD:
    """
    Side panel + end-of-game banner.
    - Wave n/final, castle health (text + bar), score
    - "Next wave in" while waiting between waves
    - GAME OVER / YOU WIN! centred over the window
    """

    def __init__(self, assets):
        self.font = assets.font_medium
        self.font_small = assets.font_small
        self.font_big = assets.font_big

    def draw(self, surf: pygame.Surface, snap):
        board_w = len(snap.cells[0]) * snap.cell_size
        x = board_w + 10
        y = 10

        pygame.draw.rect(surf, PANEL_COLOR, (board_w, 0, PANEL_WIDTH, surf.get_height()))

        lines = [
            "TOWER DEFENSE",
            f"Wave: {snap.wave_number}/{snap.final_wave}",
            f"Castle Health: {snap.structure_health}/{snap.max_structure_health}",
            f"Score: {snap.score}",
        ]
        if snap.show_countdown:
            lines.append(f"Next wave in: {snap.wave_countdown:.1f}")

        for text in lines:
            surf.blit(self.font.render(text, True, HUD_COLOR), (x, y))
            y += 30

        # -------------------------
        # Health Bar
        # -------------------------
        w = PANEL_WIDTH - 20
        h = 12
        pct = clamp(snap.structure_health / max(1, snap.max_structure_health), 0.0, 1.0)
        pygame.draw.rect(surf, (40, 40, 55), (x, y, w, h))
        pygame.draw.rect(surf, (80, 210, 120), (x, y, int(w * pct), h))
        pygame.draw.rect(surf, HUD_COLOR, (x, y, w, h), 1)

        hint = self.font_small.render("Click enemies  |  R restart  |  Esc quit", True, HUD_COLOR)
        surf.blit(hint, (x, surf.get_height() - 24))

        if snap.terminal:
            self._draw_banner(surf, snap)

    def _draw_banner(self, surf, snap):
        cx = surf.get_width() // 2
        cy = surf.get_height() // 2

        if snap.lost:
            title = self.font_big.render("GAME OVER", True, LOSE_COLOR)
            surf.blit(title, title.get_rect(center=(cx, cy)))
            return

        title = self.font_big.render("YOU WIN!", True, WIN_COLOR)
        surf.blit(title, title.get_rect(center=(cx, cy)))
        score = self.font.render(f"Final Score: {snap.score}", True, HUD_COLOR)
        surf.blit(score, score.get_rect(center=(cx, cy + 50)))
