import re
from typing import Optional, Sequence, Tuple

from .errors import BlanksAnswersMismatch

BLANK_PATTERN = re.compile(r'_+')
FILLER = '_'

# A token is either literal text or None for a blank slot.
Token = Optional[str]


class PromptTemplate:
    """A prompt card parsed into literal text and blank slots.

    Each run of underscores is one blank, whatever its length. A prompt with no
    underscores takes a single answer appended after a space.
    """

    __slots__ = ('raw', '_tokens')

    def __init__(self, raw: str):
        self.raw = raw
        if BLANK_PATTERN.search(raw):
            tokens = []
            for part in BLANK_PATTERN.split(raw):
                tokens.append(part)
                tokens.append(None)
            # split() yields one more literal than there are blanks
            tokens.pop()
        else:
            tokens = [raw + ' ', None]
        self._tokens: Tuple[Token, ...] = tuple(tokens)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def num_blanks(self) -> int:
        return sum(1 for token in self._tokens if token is None)

    def combine_with_answers(self, answers: Sequence[str]) -> str:
        num_blanks = self.num_blanks()
        if len(answers) != num_blanks:
            raise BlanksAnswersMismatch(num_blanks=num_blanks, num_answers=len(answers))
        fill = iter(answers)
        return ''.join(next(fill) if token is None else token for token in self._tokens)

    def render(self) -> str:
        return ''.join(FILLER if token is None else token for token in self._tokens)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'PromptTemplate({self.raw!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, PromptTemplate):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)
