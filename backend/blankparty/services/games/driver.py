from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .assembler import MatchAssembler
from .engine import MatchEngine, MatchPhase, Ranking
from .errors import GameAlreadyInProgress, GameNotStarted, InvalidHandSize
from .player import PlayerId

DEFAULT_HAND_SIZE = 10


@dataclass
class RoundStart:
    judge: PlayerId
    prompt: str
    num_blanks: int
    hands: Dict[PlayerId, List[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'judge': self.judge,
            'prompt': self.prompt,
            'num_blanks': self.num_blanks,
            'hands': self.hands,
        }


class GameDriver:
    """One table: assembly settings plus at most one running match."""

    def __init__(self, hand_size: int = DEFAULT_HAND_SIZE):
        self.assembler = MatchAssembler()
        self._hand_size = DEFAULT_HAND_SIZE
        self.set_hand_size(hand_size)
        self._engine: Optional[MatchEngine] = None

    # ---- assembly ----

    @property
    def hand_size(self) -> int:
        return self._hand_size

    def set_hand_size(self, hand_size: int) -> None:
        if hand_size < 1:
            raise InvalidHandSize(hand_size)
        self._hand_size = hand_size

    def add_player(self, name: str) -> None:
        self.assembler.add_player(name)

    def remove_player(self, name: str) -> None:
        self.assembler.remove_player(name)

    def remove_all_players(self) -> None:
        self.assembler.remove_all_players()

    def add_prompts(self, prompts: Iterable[str]) -> None:
        self.assembler.add_prompts(prompts)

    def clear_prompts(self) -> None:
        self.assembler.clear_prompts()

    def add_answers(self, answers: Iterable[str]) -> None:
        self.assembler.add_answers(answers)

    def clear_answers(self) -> None:
        self.assembler.clear_answers()

    # ---- match ----

    @property
    def in_progress(self) -> bool:
        return self._engine is not None

    @property
    def phase(self) -> MatchPhase:
        if self._engine is None:
            return MatchPhase.NOT_STARTED
        return self._engine.phase

    @property
    def engine(self) -> MatchEngine:
        if self._engine is None:
            raise GameNotStarted()
        return self._engine

    def start_game(self) -> List[PlayerId]:
        if self._engine is not None:
            raise GameAlreadyInProgress()
        self._engine = self.assembler.build(self._hand_size)
        return self._engine.ordered_players()

    def restart_game(self) -> List[PlayerId]:
        """Deal a fresh match over the current one.

        The running match is only replaced once the new one is built, so an
        assembly error leaves it in place.
        """
        engine = self.assembler.build(self._hand_size)
        self._engine = engine
        return engine.ordered_players()

    def ordered_players(self) -> List[PlayerId]:
        return self.engine.ordered_players()

    def start_round(self) -> RoundStart:
        engine = self.engine
        judge = engine.next_judge()
        prompt = engine.draw_next_prompt()
        return RoundStart(
            judge=judge,
            prompt=prompt,
            num_blanks=engine.active_prompt.num_blanks(),
            hands=engine.report_hands(),
        )

    def report_hands(self) -> Dict[PlayerId, List[str]]:
        return self.engine.report_hands()

    def submit_answers(self, player: str, indices: Sequence[int]) -> Optional[Dict[PlayerId, str]]:
        return self.engine.submit_answers(player, list(indices))

    def redraw_hands(self, players: Iterable[str]) -> None:
        self.engine.redraw_hands(players)

    def end_round(self, chosen_player: str) -> Ranking:
        return self.engine.increment_awesome_points(chosen_player)

    def ranking(self) -> Ranking:
        return self.engine.ranking()

    def end_game(self) -> None:
        if self._engine is None:
            raise GameNotStarted()
        self._engine = None
