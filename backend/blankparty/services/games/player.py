from typing import List, NewType, Sequence, Set

from .cards import AnswerUnit
from .errors import CardIndexOutOfBounds, CardIndexRepeated

# Player names are the only identity the core knows about.
PlayerId = NewType('PlayerId', str)


class PlayerRecord:
    def __init__(self, name: PlayerId):
        self.name = name
        self._score = 0
        self._hand: List[AnswerUnit] = []

    @property
    def score(self) -> int:
        return self._score

    def increment_score(self) -> int:
        """Add one point and return the new total."""
        self._score += 1
        return self._score

    def hand_size(self) -> int:
        return len(self._hand)

    def add_to_hand(self, card: AnswerUnit) -> None:
        self._hand.append(card)

    def hand(self) -> List[str]:
        return [card.text for card in self._hand]

    def select(self, indices: Sequence[int]) -> List[AnswerUnit]:
        """Return the cards at ``indices`` (zero-based) without touching the hand."""
        bound = len(self._hand)
        seen: Set[int] = set()
        for index in indices:
            if index < 0 or index >= bound:
                raise CardIndexOutOfBounds(chosen_index=index, hand_bound=bound)
            if index in seen:
                raise CardIndexRepeated(chosen_index=index)
            seen.add(index)
        return [self._hand[index] for index in indices]

    def play_and_remove(self, indices: Sequence[int]) -> List[AnswerUnit]:
        """Remove and return the cards at ``indices``, in that order.

        Nothing is removed unless every index is valid.
        """
        played = self.select(indices)
        chosen = set(indices)
        self._hand = [card for i, card in enumerate(self._hand) if i not in chosen]
        return played

    def discard_hand(self) -> List[AnswerUnit]:
        cards, self._hand = self._hand, []
        return cards

    def __repr__(self) -> str:
        return f'PlayerRecord(name={self.name!r}, score={self._score}, hand_size={len(self._hand)})'
