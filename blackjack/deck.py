"""A deck of cards that deals at random from the cards not yet played."""

from __future__ import annotations

import random
from collections.abc import Iterator

from .card import Card, int_to_suit, int_to_value

_MAX_ATTEMPTS = 10


class DeckExhaustedError(RuntimeError):
    """Raised when no unplayed card turns up within the allowed random picks."""


class Deck:
    """One card of each value in the diamond, heart and spade suits."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [
            Card(int_to_suit(suit), int_to_value(value))
            for suit in range(1, 4)
            for value in range(13)
        ]
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the cards and return all of them to play."""
        self._rng.shuffle(self._cards)
        for card in self._cards:
            card.played = False

    def draw(self) -> Card:
        """Pick a random unplayed card, mark it played and return it."""
        for _ in range(_MAX_ATTEMPTS):
            card = self._rng.choice(self._cards)
            if not card.played:
                card.played = True
                return card
        raise DeckExhaustedError(
            f"no unplayed card found in {_MAX_ATTEMPTS} picks"
        )

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)