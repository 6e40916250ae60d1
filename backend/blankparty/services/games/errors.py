"""Caller-facing errors raised by the game core.

Every error leaves the state it was raised from untouched. Adapters should
report ``kind`` and ``details`` verbatim so clients can tell failures apart
without parsing the message.
"""

from typing import Any, Dict


class GameCoreError(Exception):
    kind = 'game_core_error'

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        payload = {'error': self.message, 'kind': self.kind}
        payload.update(self.details)
        return payload


# ---- Assembly-time errors ----

class PlayerAlreadyExists(GameCoreError):
    kind = 'player_already_exists'

    def __init__(self, name: str) -> None:
        super().__init__(f'A player with the name {name} already exists.', name=name)
        self.name = name


class PlayerNotFound(GameCoreError):
    kind = 'player_not_found'

    def __init__(self, name: str) -> None:
        super().__init__(f'Player with name {name} does not exist.', name=name)
        self.name = name


class NotEnoughPlayers(GameCoreError):
    kind = 'not_enough_players'

    def __init__(self, num_players: int) -> None:
        super().__init__(f'There must be at least 3 players. (Now: {num_players})', num_players=num_players)
        self.num_players = num_players


class NoPrompts(GameCoreError):
    kind = 'no_prompts'

    def __init__(self) -> None:
        super().__init__('There are no prompt cards.')


class InsufficientAnswerCards(GameCoreError):
    kind = 'insufficient_answer_cards'

    def __init__(self, num_players: int, each_deal: int, num_answer_cards: int) -> None:
        super().__init__(
            f'Cannot deal {each_deal} cards to {num_players} players when there are only {num_answer_cards} cards in total.',
            num_players=num_players,
            each_deal=each_deal,
            num_answer_cards=num_answer_cards,
        )
        self.num_players = num_players
        self.each_deal = each_deal
        self.num_answer_cards = num_answer_cards


class InvalidHandSize(GameCoreError):
    kind = 'invalid_hand_size'

    def __init__(self, hand_size: int) -> None:
        super().__init__(f'Hand size must be at least 1. (Got: {hand_size})', hand_size=hand_size)
        self.hand_size = hand_size


# ---- Match-time errors ----

class BlanksAnswersMismatch(GameCoreError):
    kind = 'blanks_answers_mismatch'

    def __init__(self, num_blanks: int, num_answers: int) -> None:
        super().__init__(
            f'Mismatch in number of prompt blanks ({num_blanks}) and number of answers ({num_answers}).',
            num_blanks=num_blanks,
            num_answers=num_answers,
        )
        self.num_blanks = num_blanks
        self.num_answers = num_answers


class CardIndexOutOfBounds(GameCoreError):
    kind = 'card_index_out_of_bounds'

    def __init__(self, chosen_index: int, hand_bound: int) -> None:
        super().__init__(
            f'Player chose a card index ({chosen_index}) outside the hand (size {hand_bound}).',
            chosen_index=chosen_index,
            hand_bound=hand_bound,
        )
        self.chosen_index = chosen_index
        self.hand_bound = hand_bound


class CardIndexRepeated(GameCoreError):
    kind = 'card_index_repeated'

    def __init__(self, chosen_index: int) -> None:
        super().__init__(f'Player chose the same card index ({chosen_index}) multiple times.', chosen_index=chosen_index)
        self.chosen_index = chosen_index


class JudgeCannotSubmit(GameCoreError):
    kind = 'judge_cannot_submit'

    def __init__(self, judge_name: str) -> None:
        super().__init__(f'The judge ({judge_name}) cannot submit answers.', judge_name=judge_name)
        self.judge_name = judge_name


class AlreadySubmitted(GameCoreError):
    kind = 'already_submitted'

    def __init__(self, player_name: str) -> None:
        super().__init__(f'Player {player_name} already submitted answers.', player_name=player_name)
        self.player_name = player_name


class NoActivePrompt(GameCoreError):
    kind = 'no_active_prompt'

    def __init__(self) -> None:
        super().__init__('There is no active prompt card.')


class SubmissionsClosed(GameCoreError):
    kind = 'submissions_closed'

    def __init__(self) -> None:
        super().__init__('All answers for this round are in; waiting for the judge.')


class NoActiveJudge(GameCoreError):
    kind = 'no_active_judge'

    def __init__(self) -> None:
        super().__init__('There is no active judge.')


class JudgeCannotWin(GameCoreError):
    kind = 'judge_cannot_win'

    def __init__(self, judge_name: str) -> None:
        super().__init__(f'The judge ({judge_name}) cannot be chosen as the round winner.', judge_name=judge_name)
        self.judge_name = judge_name


class GameNotStarted(GameCoreError):
    kind = 'game_not_started'

    def __init__(self) -> None:
        super().__init__('The game is not started.')


class GameAlreadyInProgress(GameCoreError):
    kind = 'game_already_in_progress'

    def __init__(self) -> None:
        super().__init__('The game is already in progress.')
