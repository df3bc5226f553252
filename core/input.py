# core/input.py
from typing import Optional, Tuple

import pygame


class PointerInput:
    """
    Primary-button clicks, one per frame.
    Feed every event through handle_event(); the Game reads consume_click()
    once per tick so a click is never applied twice.
    """

    def __init__(self):
        self._click: Optional[Tuple[int, int]] = None

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # first click of the frame wins
            if self._click is None:
                self._click = (int(event.pos[0]), int(event.pos[1]))
            return True
        return False

    def consume_click(self) -> Optional[Tuple[int, int]]:
        click = self._click
        self._click = None
        return click
