import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Hand size applied to new lobbies, and the range lobbies may pick from
    DEFAULT_HAND_SIZE = int(os.environ.get('DEFAULT_HAND_SIZE', '10'))
    MIN_HAND_SIZE = int(os.environ.get('MIN_HAND_SIZE', '1'))
    MAX_HAND_SIZE = int(os.environ.get('MAX_HAND_SIZE', '25'))
    # Points needed to win a match
    DEFAULT_WIN_TARGET = int(os.environ.get('DEFAULT_WIN_TARGET', '5'))
    GAME_CODE_LENGTH = int(os.environ.get('GAME_CODE_LENGTH', '4'))
    # Card libraries; unset means the decks bundled with the package
    DECK_LIBRARY_DIR = os.environ.get('DECK_LIBRARY_DIR') or None
    DEFAULT_DECK_LIBRARY = os.environ.get('DEFAULT_DECK_LIBRARY', 'default')
    # Seconds to wait after the last session owner disconnects before ending the lobby
    SESSION_END_GRACE_SEC = float(os.environ.get('SESSION_END_GRACE_SEC', '2'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
