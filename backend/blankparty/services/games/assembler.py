import logging
import random
from typing import Iterable, Set

from .cards import AnswerUnit, CardPool
from .engine import MatchEngine
from .errors import (
    InsufficientAnswerCards,
    InvalidHandSize,
    NoPrompts,
    NotEnoughPlayers,
    PlayerAlreadyExists,
    PlayerNotFound,
)
from .player import PlayerId, PlayerRecord
from .prompt import PromptTemplate

logger = logging.getLogger(__name__)

MIN_PLAYERS = 3


class MatchAssembler:
    """Collects the roster and both card registries, then deals a match.

    Registries are sets, so adding the same prompt or answer twice keeps one
    copy. They are left as they are after ``build`` so the same table can be
    dealt again for a rematch.
    """

    def __init__(self) -> None:
        self._players: Set[PlayerId] = set()
        self._prompts: Set[str] = set()
        self._answers: Set[str] = set()

    def num_players(self) -> int:
        return len(self._players)

    def num_prompts(self) -> int:
        return len(self._prompts)

    def num_answers(self) -> int:
        return len(self._answers)

    def players(self) -> Set[PlayerId]:
        return set(self._players)

    def add_player(self, name: str) -> None:
        player = PlayerId(name)
        if player in self._players:
            raise PlayerAlreadyExists(name)
        self._players.add(player)

    def remove_player(self, name: str) -> None:
        player = PlayerId(name)
        if player not in self._players:
            raise PlayerNotFound(name)
        self._players.remove(player)

    def remove_all_players(self) -> None:
        self._players.clear()

    def add_prompt(self, prompt: str) -> None:
        self._prompts.add(prompt)

    def add_prompts(self, prompts: Iterable[str]) -> None:
        for prompt in prompts:
            self.add_prompt(prompt)

    def clear_prompts(self) -> None:
        self._prompts.clear()

    def add_answer(self, answer: str) -> None:
        self._answers.add(answer)

    def add_answers(self, answers: Iterable[str]) -> None:
        for answer in answers:
            self.add_answer(answer)

    def clear_answers(self) -> None:
        self._answers.clear()

    def build(self, hand_size: int) -> MatchEngine:
        if hand_size < 1:
            raise InvalidHandSize(hand_size)
        num_players = len(self._players)
        if num_players < MIN_PLAYERS:
            raise NotEnoughPlayers(num_players=num_players)
        if not self._prompts:
            raise NoPrompts()
        if num_players * hand_size > len(self._answers):
            raise InsufficientAnswerCards(
                num_players=num_players,
                each_deal=hand_size,
                num_answer_cards=len(self._answers),
            )

        prompt_pool = CardPool.from_cards(PromptTemplate(p) for p in self._prompts)
        answer_pool = CardPool.from_cards(AnswerUnit(a) for a in self._answers)
        prompt_pool.shuffle()
        answer_pool.shuffle()

        seats = list(self._players)
        random.shuffle(seats)
        records = [PlayerRecord(name) for name in seats]
        for record in records:
            for _ in range(hand_size):
                card = answer_pool.draw()
                if card is None:
                    raise RuntimeError('answer pool ran dry while dealing despite the size check')
                record.add_to_hand(card)

        logger.info(
            f"[deal] players={num_players} hand_size={hand_size} prompts={prompt_pool.total_count()} "
            f"answers_left={answer_pool.total_count()}"
        )
        return MatchEngine(records, prompt_pool, answer_pool, hand_size)
