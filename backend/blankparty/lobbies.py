import random
import string
import threading
from typing import Dict, List, Optional

from blankparty.services.games import GameDriver, RoundStart
from blankparty.services.games.engine import Ranking


class LobbyNotFound(LookupError):
    def __init__(self, code: str):
        super().__init__(f'Game {code} not found')
        self.code = code


class Lobby:
    """A game table: its driver plus what the web clients need between calls."""

    def __init__(self, code: str, hand_size: int, win_target: int):
        self.code = code
        self.driver = GameDriver(hand_size=hand_size)
        self.win_target = win_target
        self.status = 'lobby'  # lobby, in_progress, finished
        self.round_number = 0
        self.current_round: Optional[RoundStart] = None
        self.collected_answers: Optional[Dict[str, str]] = None
        self.last_ranking: Ranking = []
        self.winner: Optional[str] = None
        # The engine assumes one caller at a time
        self.lock = threading.Lock()

    def players(self) -> List[dict]:
        if not self.driver.in_progress:
            return [{'name': name, 'score': 0} for name in sorted(self.driver.assembler.players())]
        engine = self.driver.engine
        submitted = set(engine.submitted_players)
        judge = engine.judge
        return [
            {
                'name': name,
                'score': engine.player(name).score,
                'is_judge': name == judge,
                'has_submitted': name in submitted,
            }
            for name in engine.ordered_players()
        ]

    def to_dict(self) -> dict:
        payload = {
            'game_code': self.code,
            'status': self.status,
            'stage': self.driver.phase.value,
            'hand_size': self.driver.hand_size,
            'win_target': self.win_target,
            'num_prompts': self.driver.assembler.num_prompts(),
            'num_answers': self.driver.assembler.num_answers(),
            'players': self.players(),
            'current_round': self.round_number,
            'round': None,
            'collected_answers': None,
            'ranking': [{'name': name, 'score': score} for name, score in self.last_ranking],
            'winner': self.winner,
        }
        if self.current_round is not None:
            payload['round'] = {
                'judge': self.current_round.judge,
                'prompt': self.current_round.prompt,
                'num_blanks': self.current_round.num_blanks,
            }
        if self.collected_answers is not None:
            payload['collected_answers'] = [
                {'player': name, 'answer': answer} for name, answer in self.collected_answers.items()
            ]
        return payload


def generate_game_code(existing, length=4):
    """Generate a unique, short game code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if code not in existing:
            return code


class LobbyRegistry:
    def __init__(self):
        self._lobbies: Dict[str, Lobby] = {}
        self._lock = threading.Lock()

    def create(self, hand_size: int, win_target: int, code_length: int = 4) -> Lobby:
        with self._lock:
            code = generate_game_code(self._lobbies, length=code_length)
            lobby = Lobby(code, hand_size=hand_size, win_target=win_target)
            self._lobbies[code] = lobby
            return lobby

    def get(self, code: str) -> Lobby:
        lobby = self._lobbies.get(code.upper())
        if lobby is None:
            raise LobbyNotFound(code.upper())
        return lobby

    def remove(self, code: str) -> Optional[Lobby]:
        with self._lock:
            return self._lobbies.pop(code.upper(), None)

    def codes(self) -> List[str]:
        return list(self._lobbies)

    def __contains__(self, code: str) -> bool:
        return code.upper() in self._lobbies

    def __len__(self) -> int:
        return len(self._lobbies)
