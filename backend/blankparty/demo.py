"""A scripted match for trying the engine from the command line.

Every player submits the first cards of their hand and each judge picks the
next answer in turn, so matches always end.
"""

from typing import Callable, Optional, Tuple

from blankparty.services.games import GameDriver
from blankparty.services.games.decks import load_library

RULE = '=' * 54


def play_demo(
    num_players: int = 4,
    hand_size: int = 10,
    win_target: int = 3,
    library: str = 'default',
    deck_dir: Optional[str] = None,
    echo: Callable[[str], None] = print,
) -> Tuple[str, int]:
    """Run a match to ``win_target`` and return (winner, rounds played)."""
    driver = GameDriver(hand_size=hand_size)
    for i in range(num_players):
        driver.add_player(f'Player {chr(ord("A") + i)}' if i < 26 else f'Player {i + 1}')
    driver.add_prompts(load_library('prompts', library, base_dir=deck_dir))
    driver.add_answers(load_library('answers', library, base_dir=deck_dir))

    ordered = driver.start_game()
    echo(f"Seating: {', '.join(ordered)}")

    pick = 0
    rounds = 0
    while True:
        rounds += 1
        info = driver.start_round()
        echo(RULE)
        echo(f"Round {rounds}. The judge is {info.judge}!")
        echo(f"Answer this: {info.prompt}")

        collected = None
        for player in ordered:
            if player == info.judge:
                continue
            collected = driver.submit_answers(player, range(info.num_blanks))

        echo('The following creative answers were collected:')
        answers = list(collected.items())
        for i, (_, answer) in enumerate(answers, start=1):
            echo(f"{i} - {answer}")

        chosen, _ = answers[pick % len(answers)]
        pick += 1
        echo(f"{info.judge} picks: {collected[chosen]} ({chosen})")
        ranking = driver.end_round(chosen)

        rank = 0
        last_score = None
        for name, score in ranking:
            if score != last_score:
                rank += 1
            echo(f"{rank} {name} - {score}")
            last_score = score

        leader, top = ranking[0]
        if top >= win_target:
            echo(RULE)
            echo(f"Congratulations, {leader}, you have won!")
            driver.end_game()
            return leader, rounds
