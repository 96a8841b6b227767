"""Playing cards: suits, values and the card itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Value(IntEnum):
    """Card rank, numbered in the order the ranks appear on the card sheet."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


class Suit(IntEnum):
    """Card suit, numbered in the order the rows appear on the card sheet."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3
    BACK = 4


_PLAYING_SUITS = frozenset({Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES})


def int_to_suit(suit: int) -> Suit:
    """Return the playing suit numbered ``suit``; the card back is not one."""
    try:
        result = Suit(suit)
    except ValueError:
        raise ValueError(f"no suit numbered {suit!r}") from None
    if result not in _PLAYING_SUITS:
        raise ValueError(f"no suit numbered {suit!r}")
    return result


def int_to_value(value: int) -> Value:
    """Return the card value numbered ``value``."""
    try:
        return Value(value)
    except ValueError:
        raise ValueError(f"no card value numbered {value!r}") from None


@dataclass(eq=False)
class Card:
    """A card with a suit and a value; ``played`` marks it as dealt from its deck."""

    suit: Suit
    value: Value
    played: bool = False

    def __repr__(self) -> str:
        state = ", played" if self.played else ""
        return f"Card({self.value.name} of {self.suit.name}{state})"