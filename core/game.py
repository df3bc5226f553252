# core/game.py
import logging

import pygame

from core.assets import Assets
from core.config import SimConfig
from core.input import PointerInput
from core.log import setup_logging
from core.settings import BG_COLOR, FPS, HEIGHT, MAX_FRAME_DT, PANEL_WIDTH, TITLE
from ui.board import BoardRenderer
from ui.hud import HUD
from world.session import Session

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, config: SimConfig = None):
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.session = Session(config)
        width = self.session.grid.width_px + PANEL_WIDTH
        height = max(HEIGHT, self.session.grid.height_px)

        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.running = True

        self.assets = Assets()
        self.assets.load()

        self.input = PointerInput()
        self.board = BoardRenderer()
        self.hud = HUD(self.assets)

    def run(self):
        logger.info("game started")
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            if dt > MAX_FRAME_DT:
                dt = MAX_FRAME_DT

            self._handle_events()
            self.session.tick(dt, self.input.consume_click())

            snap = self.session.snapshot()
            self.screen.fill(BG_COLOR)
            self.board.draw(self.screen, snap)
            self.hud.draw(self.screen, snap)
            pygame.display.flip()

        pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.session.restart()
                    self.input.consume_click()

            else:
                self.input.handle_event(event)


def main():
    setup_logging()
    Game().run()
