import pytest

from blankparty.services.games import AnswerUnit, PlayerId, PlayerRecord
from blankparty.services.games.errors import CardIndexOutOfBounds, CardIndexRepeated


@pytest.fixture()
def player():
    record = PlayerRecord(PlayerId('A'))
    for i in range(10):
        record.add_to_hand(AnswerUnit(str(i)))
    return record


def test_new_player():
    record = PlayerRecord(PlayerId('A'))
    assert record.hand_size() == 0
    assert record.score == 0


def test_increment_score_returns_new_total():
    record = PlayerRecord(PlayerId('A'))
    assert record.increment_score() == 1
    assert record.increment_score() == 2
    assert record.score == 2


def test_hand_reports_in_order(player):
    assert player.hand() == [str(i) for i in range(10)]


def test_play_and_remove_keeps_submission_order(player):
    played = player.play_and_remove([0, 6, 4])
    assert [card.text for card in played] == ['0', '6', '4']
    assert player.hand() == ['1', '2', '3', '5', '7', '8', '9']


def test_play_out_of_bounds_leaves_hand(player):
    with pytest.raises(CardIndexOutOfBounds) as excinfo:
        player.play_and_remove([0, 10, 4])
    assert excinfo.value.chosen_index == 10
    assert excinfo.value.hand_bound == 10
    assert player.hand_size() == 10


def test_play_negative_index_is_out_of_bounds(player):
    with pytest.raises(CardIndexOutOfBounds):
        player.play_and_remove([-1])
    assert player.hand_size() == 10


def test_play_same_card_twice_leaves_hand(player):
    with pytest.raises(CardIndexRepeated) as excinfo:
        player.play_and_remove([0, 0, 4])
    assert excinfo.value.chosen_index == 0
    assert player.hand() == [str(i) for i in range(10)]


def test_select_does_not_remove(player):
    assert [c.text for c in player.select([2, 1])] == ['2', '1']
    assert player.hand_size() == 10


def test_discard_hand_empties_it(player):
    cards = player.discard_hand()
    assert len(cards) == 10
    assert player.hand_size() == 0
