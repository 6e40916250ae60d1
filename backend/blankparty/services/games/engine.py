"""Round progression for a single match.

A round runs: ``next_judge`` -> ``draw_next_prompt`` -> ``submit_answers`` from
every non-judge -> ``increment_awesome_points`` for the judge's pick. Ending
the match (someone reaching a target score) is left to the caller.
"""

import enum
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .cards import AnswerUnit, CardPool
from .errors import (
    AlreadySubmitted,
    JudgeCannotSubmit,
    JudgeCannotWin,
    NoActiveJudge,
    NoActivePrompt,
    PlayerNotFound,
    SubmissionsClosed,
)
from .player import PlayerId, PlayerRecord
from .prompt import PromptTemplate

logger = logging.getLogger(__name__)

Ranking = List[Tuple[PlayerId, int]]


class MatchPhase(str, enum.Enum):
    NOT_STARTED = 'not_started'
    AWAITING_ROUND = 'awaiting_round'
    ROUND_OPEN = 'round_open'
    ROUND_JUDGING = 'round_judging'


class MatchEngine:
    def __init__(
        self,
        players: Sequence[PlayerRecord],
        prompt_pool: CardPool[PromptTemplate],
        answer_pool: CardPool[AnswerUnit],
        hand_size: int,
    ):
        # Seat order is fixed for the match; judges rotate through it.
        self._order: Tuple[PlayerId, ...] = tuple(p.name for p in players)
        self._players: Dict[PlayerId, PlayerRecord] = {p.name: p for p in players}
        self._prompt_pool = prompt_pool
        self._answer_pool = answer_pool
        self._hand_size = hand_size

        self._judge_index: Optional[int] = None
        self._active_prompt: Optional[PromptTemplate] = None
        # Scratch for the open round: submitter -> combined answer, in submission order.
        self._submissions: Dict[PlayerId, str] = {}
        self._judging = False

    # ---- read-outs ----

    @property
    def hand_size(self) -> int:
        return self._hand_size

    @property
    def judge(self) -> Optional[PlayerId]:
        if self._judge_index is None:
            return None
        return self._order[self._judge_index]

    @property
    def active_prompt(self) -> Optional[PromptTemplate]:
        return self._active_prompt

    @property
    def submitted_players(self) -> List[PlayerId]:
        return list(self._submissions)

    @property
    def phase(self) -> MatchPhase:
        if self._active_prompt is None:
            return MatchPhase.AWAITING_ROUND
        if self._judging:
            return MatchPhase.ROUND_JUDGING
        return MatchPhase.ROUND_OPEN

    @property
    def prompt_pool(self) -> CardPool[PromptTemplate]:
        return self._prompt_pool

    @property
    def answer_pool(self) -> CardPool[AnswerUnit]:
        return self._answer_pool

    def player(self, name: str) -> PlayerRecord:
        try:
            return self._players[PlayerId(name)]
        except KeyError:
            raise PlayerNotFound(name) from None

    def ordered_players(self) -> List[PlayerId]:
        return list(self._order)

    def report_hands(self) -> Dict[PlayerId, List[str]]:
        return {name: self._players[name].hand() for name in self._order}

    def ranking(self) -> Ranking:
        """Players by descending score; ties keep seat order."""
        seats = {name: seat for seat, name in enumerate(self._order)}
        ordered = sorted(self._players.values(), key=lambda p: (-p.score, seats[p.name]))
        return [(p.name, p.score) for p in ordered]

    # ---- round progression ----

    def next_judge(self) -> PlayerId:
        if self._judge_index is None:
            self._judge_index = 0
        else:
            self._judge_index = (self._judge_index + 1) % len(self._order)
        judge = self._order[self._judge_index]
        logger.info(f"[judge] judge={judge} seat={self._judge_index}")
        return judge

    def draw_next_prompt(self) -> str:
        if self._active_prompt is not None:
            self._prompt_pool.discard(self._active_prompt)
            self._active_prompt = None
        if self._submissions:
            logger.info(f"[round-abandon] dropping {len(self._submissions)} pending submissions")
            self._submissions.clear()
            self._top_up_hands()
        self._judging = False

        prompt = self._prompt_pool.draw()
        if prompt is None:
            raise RuntimeError('prompt pool is empty; a match cannot be assembled without prompts')
        self._active_prompt = prompt
        rendered = prompt.render()
        logger.info(f"[round-start] judge={self.judge} prompt={rendered!r} blanks={prompt.num_blanks()}")
        return rendered

    def submit_answers(self, player: str, indices: Sequence[int]) -> Optional[Dict[PlayerId, str]]:
        """Play ``indices`` from ``player``'s hand against the active prompt.

        Returns None while answers are still outstanding. The submission that
        completes the round gets every combined answer keyed by submitter;
        at that point all hands have been topped up again.
        """
        prompt = self._active_prompt
        if prompt is None:
            raise NoActivePrompt()
        if self._judging:
            raise SubmissionsClosed()
        name = PlayerId(player)
        if name == self.judge:
            raise JudgeCannotSubmit(judge_name=name)
        if name in self._submissions:
            raise AlreadySubmitted(player_name=name)
        record = self.player(name)

        # Combine before removing anything so a blank-count mismatch leaves the hand alone.
        chosen = record.select(indices)
        combined = prompt.combine_with_answers([card.text for card in chosen])
        played = record.play_and_remove(indices)
        self._submissions[name] = combined
        for card in played:
            self._answer_pool.discard(card)
        logger.info(f"[submit] player={name} collected={len(self._submissions)}/{len(self._order) - 1}")

        if len(self._submissions) < len(self._order) - 1:
            return None

        self._top_up_hands()
        collected, self._submissions = self._submissions, {}
        self._judging = True
        logger.info(f"[round-complete] answers={len(collected)}")
        return collected

    def increment_awesome_points(self, chosen_player: str) -> Ranking:
        judge = self.judge
        if judge is None:
            raise NoActiveJudge()
        name = PlayerId(chosen_player)
        if name == judge:
            raise JudgeCannotWin(judge_name=judge)
        score = self.player(name).increment_score()
        if self._judging:
            # Winner chosen; the round is over until the next prompt is drawn.
            self._judging = False
            self._prompt_pool.discard(self._active_prompt)
            self._active_prompt = None
        logger.info(f"[score] judge={judge} winner={name} score={score}")
        return self.ranking()

    def redraw_hands(self, players: Iterable[str]) -> None:
        """Swap the whole hand of each named player for fresh cards."""
        names = [PlayerId(p) for p in players]
        records = [self.player(name) for name in names]
        for record in records:
            for card in record.discard_hand():
                self._answer_pool.discard(card)
        for record in records:
            self._fill_hand(record)
        if names:
            logger.info(f"[redraw] players={names}")

    # ---- helpers ----

    def _fill_hand(self, record: PlayerRecord) -> None:
        while record.hand_size() < self._hand_size:
            card = self._answer_pool.draw()
            if card is None:
                raise RuntimeError(f'answer pool exhausted while refilling the hand of {record.name}')
            record.add_to_hand(card)

    def _top_up_hands(self) -> None:
        for name in self._order:
            self._fill_hand(self._players[name])
