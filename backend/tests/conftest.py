import os
import sys
import pytest

# Ensure the backend root (containing the `blankparty` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from blankparty import create_app, socketio
from blankparty.services.games import AnswerUnit, CardPool, MatchEngine, PlayerId, PlayerRecord, PromptTemplate


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    DEFAULT_HAND_SIZE = 10
    MIN_HAND_SIZE = 1
    MAX_HAND_SIZE = 25
    DEFAULT_WIN_TARGET = 5
    GAME_CODE_LENGTH = 4
    DECK_LIBRARY_DIR = None
    DEFAULT_DECK_LIBRARY = 'default'
    SESSION_END_GRACE_SEC = 0
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


def make_engine(names, prompts, answers, hand_size):
    """Engine with a known seat order and unshuffled decks.

    Hands are dealt from the end of ``answers`` (the top of the draw stack).
    """
    prompt_pool = CardPool.from_cards(PromptTemplate(p) for p in prompts)
    answer_pool = CardPool.from_cards(AnswerUnit(a) for a in answers)
    records = [PlayerRecord(PlayerId(n)) for n in names]
    for record in records:
        for _ in range(hand_size):
            record.add_to_hand(answer_pool.draw())
    return MatchEngine(records, prompt_pool, answer_pool, hand_size)


@pytest.fixture()
def engine():
    """Players A, B, C (seated in that order), hand size 3, one one-blank prompt."""
    return make_engine(
        ['A', 'B', 'C'],
        ['Who am I?'],
        [f'x{i}' for i in range(1, 13)],
        hand_size=3,
    )


@pytest.fixture()
def engine_factory():
    return make_engine
