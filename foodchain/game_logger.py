import logging


class GameLogger:
    """Single-line event sink for a game.

    Records go through the `foodchain.game` logger; give a path to also
    write them to a fresh log file, one `[HH:MM:SS] message` per line.
    """

    def __init__(self, path=None, echo=False):
        self.logger = logging.getLogger("foodchain.game")
        self.logger.setLevel(logging.INFO)
        self.echo = echo
        self.handler = None
        if path is not None:
            self.handler = logging.FileHandler(path, mode="w", encoding="utf-8")
            self.handler.setFormatter(
                logging.Formatter("[%(asctime)s] %(message)s", datefmt="%H:%M:%S"))
            self.logger.addHandler(self.handler)
            # keep game events off the console handlers
            self.logger.propagate = False

    def log(self, message):
        self.logger.info(message)
        if self.echo:
            print(message)

    def close(self):
        if self.handler is not None:
            self.logger.removeHandler(self.handler)
            self.handler.close()
            self.handler = None
            self.logger.propagate = True
