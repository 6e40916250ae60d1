import random

from blankparty.services.games import AnswerUnit, CardPool


def test_new_pool_is_empty():
    pool = CardPool()
    assert pool.total_count() == 0
    assert pool.draw() is None


def test_add_and_discard_count_towards_total():
    pool = CardPool()
    pool.add_to_draw(AnswerUnit('a'))
    pool.discard(AnswerUnit('b'))
    assert pool.total_count() == 2
    assert pool.draw_count == 1
    assert pool.discard_count == 1


def test_draw_takes_top_of_stack():
    pool = CardPool.from_cards([0, 1])
    assert pool.draw() == 1
    assert pool.draw() == 0


def test_draw_reshuffles_discard_when_stack_empty():
    pool = CardPool()
    pool.discard(0)
    pool.discard(1)
    drawn = pool.draw()
    assert drawn in (0, 1)
    assert pool.discard_count == 0
    assert pool.draw_count == 1


def test_shuffle_permutes_cards():
    pool = CardPool.from_cards(range(1001))
    pool.shuffle()
    drawn = [pool.draw() for _ in range(1001)]
    assert sorted(drawn) == list(range(1001))
    assert drawn != list(range(1000, -1, -1)), '1001 cards came out unshuffled'


def test_refill_moves_every_discard_back():
    pool = CardPool()
    for i in range(51):
        pool.discard(i)
    pool.refill_and_shuffle()
    assert pool.draw_count == 51
    assert pool.discard_count == 0


def test_total_is_conserved_across_random_operations():
    pool = CardPool.from_cards(range(20))
    held = []
    for _ in range(500):
        if held and random.random() < 0.5:
            pool.discard(held.pop(random.randrange(len(held))))
        else:
            card = pool.draw()
            if card is not None:
                held.append(card)
        assert pool.total_count() + len(held) == 20
    for card in held:
        pool.discard(card)
    assert pool.total_count() == 20


def test_answer_unit_is_immutable_text():
    card = AnswerUnit('Hello World')
    assert card.text == 'Hello World'
    assert str(card) == 'Hello World'
    assert card == AnswerUnit('Hello World')
