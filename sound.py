# sound.py
import logging
import os

import pygame

from foodchain.config import WIN_SOUND_PATH, LOSE_SOUND_PATH

logger = logging.getLogger(__name__)


class SoundManager:
    """Plays the win/lose cue at game over."""

    def __init__(self, win_path=WIN_SOUND_PATH, lose_path=LOSE_SOUND_PATH):
        self.win_path = win_path
        self.lose_path = lose_path

    def on_win(self):
        self._play(self.win_path)

    def on_lose(self):
        self._play(self.lose_path)

    def _play(self, path):
        if not os.path.exists(path):
            logger.warning("Sound file not found: %s", path)
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.Sound(path).play()
        except pygame.error as e:
            logger.warning("Could not play %s: %s", path, e)
