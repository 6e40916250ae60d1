import random
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class AnswerUnit:
    """Text of one answer card."""
    text: str

    def __str__(self) -> str:
        return self.text


class CardPool(Generic[T]):
    """Draw stack plus discard pile for one kind of card.

    Cards only ever move between the two piles (or out to a hand and back
    via ``discard``), so ``total_count`` changes only through ``add_to_draw``.
    """

    def __init__(self) -> None:
        self._draw: List[T] = []
        self._discard: List[T] = []

    @classmethod
    def from_cards(cls, cards: Iterable[T]) -> 'CardPool[T]':
        pool = cls()
        for card in cards:
            pool.add_to_draw(card)
        return pool

    @property
    def draw_count(self) -> int:
        return len(self._draw)

    @property
    def discard_count(self) -> int:
        return len(self._discard)

    def total_count(self) -> int:
        return len(self._draw) + len(self._discard)

    def add_to_draw(self, card: T) -> None:
        self._draw.append(card)

    def discard(self, card: T) -> None:
        self._discard.append(card)

    def draw(self) -> Optional[T]:
        """Pop the top card, reshuffling the discard pile in when the stack is empty.

        Returns None only when both piles are empty.
        """
        if not self._draw:
            if not self._discard:
                return None
            self.refill_and_shuffle()
        return self._draw.pop()

    def shuffle(self) -> None:
        random.shuffle(self._draw)

    def refill_and_shuffle(self) -> None:
        self._draw.extend(self._discard)
        self._discard.clear()
        self.shuffle()
