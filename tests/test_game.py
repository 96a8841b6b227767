import random

import pytest

from blackjack.card import Card, Suit, Value
from blackjack.deck import Deck
from blackjack.game import (
    BlackJack,
    Button,
    Mode,
    MouseButtonDown,
    MouseMotion,
    Outcome,
    button_at,
)


class ScriptedDeck:
    """Deals the given values in order."""

    def __init__(self, values):
        self._cards = [Card(Suit.HEARTS, value) for value in values]
        self.shuffles = 0

    def shuffle(self):
        self.shuffles += 1

    def draw(self):
        return self._cards.pop(0)


def centre(button):
    return MouseMotion(
        button.left + button.width / 2, button.top + button.height / 2
    )


def click(game, button):
    game.update(centre(button))
    game.update(MouseButtonDown())


def started(values, bank=100.0):
    game = BlackJack(ScriptedDeck(values), bank)
    game.update(object())
    return game


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (75, 50, Button.LEFT),
        (200, 125, Button.LEFT),
        (700, 50, Button.RIGHT),
        (825, 125, Button.RIGHT),
        (450, 90, None),
        (100, 49, None),
        (760, 126, None),
    ],
)
def test_button_at(x, y, expected):
    assert button_at(x, y) is expected


def test_new_game_waits_for_setup():
    game = BlackJack(ScriptedDeck([]), 50.0)
    assert game.mode is Mode.SETUP
    assert game.bank == 50.0
    assert game.executing is True
    assert game.outcome is Outcome.UNKNOWN


def test_setup_deals_two_to_player_and_one_to_dealer():
    deck = ScriptedDeck([Value.TWO, Value.THREE, Value.FIVE])
    game = BlackJack(deck, 10.0)
    game.update(object())
    assert game.mode is Mode.INPUT
    assert len(game.player_hand) == 2
    assert len(game.dealer_hand) == 1
    assert deck.shuffles == 1
    assert [card.value for card in game.player_hand] == [Value.TWO, Value.THREE]


def test_hit_under_limit_returns_to_input():
    game = started([Value.TWO, Value.THREE, Value.FIVE, Value.FOUR])
    click(game, Button.RIGHT)
    assert game.mode is Mode.INPUT
    assert len(game.player_hand) == 3
    assert game.outcome is Outcome.UNKNOWN


def test_hit_that_busts_loses():
    game = started(
        [Value.TEN, Value.SIX, Value.FIVE, Value.KING, Value.TEN, Value.TWO]
    )
    click(game, Button.RIGHT)
    assert game.player_hand.count() > 21
    assert game.mode is Mode.FINISH
    assert game.outcome is Outcome.LOSS
    assert game.conclusion == "YOU LOSE"
    assert game.dealer_hand.count() > 15


def test_hold_with_higher_hand_wins():
    game = started([Value.TEN, Value.KING, Value.EIGHT, Value.KING])
    click(game, Button.LEFT)
    assert game.holding is True
    assert game.mode is Mode.FINISH
    assert game.outcome is Outcome.WIN
    assert game.conclusion == "YOU WIN"
    assert game.player_hand.count() > game.dealer_hand.count()


def test_hold_with_equal_hand_ties():
    game = started([Value.TEN, Value.EIGHT, Value.EIGHT, Value.KING])
    click(game, Button.LEFT)
    assert game.outcome is Outcome.TIE
    assert game.conclusion == "TIE"
    assert game.player_hand.count() == game.dealer_hand.count()


def test_dealer_bust_is_a_win():
    game = started([Value.TEN, Value.SEVEN, Value.TWO, Value.KING, Value.KING])
    click(game, Button.LEFT)
    assert game.dealer_hand.count() > 21
    assert game.outcome is Outcome.WIN


def test_dealer_beating_player_is_a_loss():
    game = started([Value.TEN, Value.SEVEN, Value.NINE, Value.KING])
    click(game, Button.LEFT)
    assert game.dealer_hand.count() > game.player_hand.count()
    assert game.outcome is Outcome.LOSS


def test_win_pays_double_the_bet():
    game = started([Value.TEN, Value.KING, Value.EIGHT, Value.KING], bank=100.0)
    game.bet = 10.0
    click(game, Button.LEFT)
    assert game.bank == 100.0 + 2 * 10.0


def test_loss_costs_the_bet():
    game = started([Value.TEN, Value.SEVEN, Value.NINE, Value.KING], bank=100.0)
    game.bet = 10.0
    click(game, Button.LEFT)
    assert game.bank == 100.0 - 10.0


def test_tie_keeps_the_bank():
    game = started([Value.TEN, Value.EIGHT, Value.EIGHT, Value.KING], bank=100.0)
    game.bet = 10.0
    click(game, Button.LEFT)
    assert game.bank == 100.0


def test_click_away_from_buttons_does_nothing():
    game = started([Value.TWO, Value.THREE, Value.FIVE])
    game.update(MouseMotion(450, 300))
    game.update(MouseButtonDown())
    assert game.mode is Mode.INPUT
    assert game.active_button is None
    assert len(game.player_hand) == 2


def test_moving_off_a_button_deactivates_it():
    game = started([Value.TWO, Value.THREE, Value.FIVE])
    game.update(centre(Button.LEFT))
    assert game.active_button is Button.LEFT
    game.update(MouseMotion(450, 90))
    assert game.active_button is None


def test_new_button_after_round_starts_setup():
    game = started(
        [Value.TEN, Value.KING, Value.EIGHT, Value.KING, Value.TWO, Value.THREE, Value.FOUR]
    )
    game.bet = 5.0
    click(game, Button.LEFT)
    assert game.mode is Mode.FINISH
    click(game, Button.LEFT)
    assert game.mode is Mode.SETUP
    game.update(object())
    assert game.mode is Mode.INPUT
    assert game.conclusion == ""
    assert game.bet == 0.0
    assert game.holding is False
    assert game.outcome is Outcome.UNKNOWN
    assert [card.value for card in game.player_hand] == [Value.TWO, Value.THREE]
    assert [card.value for card in game.dealer_hand] == [Value.FOUR]


def test_quit_button_after_round_stops_game():
    game = started([Value.TEN, Value.KING, Value.EIGHT, Value.KING])
    click(game, Button.LEFT)
    click(game, Button.RIGHT)
    assert game.executing is False
    assert game.mode is Mode.FINISH


def test_quit_not_available_during_round():
    game = started([Value.TWO, Value.THREE, Value.FIVE, Value.FOUR])
    click(game, Button.RIGHT)
    assert game.executing is True


@pytest.mark.parametrize("seed", range(5))
def test_round_with_real_deck_settles(seed):
    game = BlackJack(Deck(random.Random(seed)), 100.0)
    game.update(object())
    click(game, Button.LEFT)
    assert game.mode is Mode.FINISH
    assert game.outcome in {Outcome.WIN, Outcome.LOSS, Outcome.TIE}
    assert game.conclusion in {"YOU WIN", "YOU LOSE", "TIE"}
    assert game.dealer_hand.count() > 15
    assert all(card.played for card in game.player_hand)