# core/assets.py
# "Python-only assets": default pygame font, no external files.

import pygame


class Assets:
    def __init__(self):
        self.font_small = None
        self.font_medium = None
        self.font_big = None

    def load(self):
        self.font_small = pygame.font.Font(None, 22)
        self.font_medium = pygame.font.Font(None, 28)
        self.font_big = pygame.font.Font(None, 52)
