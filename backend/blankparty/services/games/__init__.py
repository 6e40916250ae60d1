"""Game domain services: decks, hands, rounds and scoring.

This package contains pure domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""

from .assembler import MatchAssembler
from .cards import AnswerUnit, CardPool
from .driver import GameDriver, RoundStart
from .engine import MatchEngine, MatchPhase
from .errors import GameCoreError
from .player import PlayerId, PlayerRecord
from .prompt import PromptTemplate

__all__ = [
    'AnswerUnit',
    'CardPool',
    'GameCoreError',
    'GameDriver',
    'MatchAssembler',
    'MatchEngine',
    'MatchPhase',
    'PlayerId',
    'PlayerRecord',
    'PromptTemplate',
    'RoundStart',
]
