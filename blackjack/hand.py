"""A blackjack hand drawing from a shared deck."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from .card import Card, Value

_CARD_GAP = 3
_FACE_VALUES = frozenset({Value.JACK, Value.QUEEN, Value.KING})


class _CardSource(Protocol):
    def draw(self) -> Card: ...


class Hand:
    """Cards held by one player; several hands may share one deck."""

    def __init__(self, deck: _CardSource, y: int = 400) -> None:
        self._deck = deck
        self.y = y
        self._cards: list[Card] = []

    def draw(self) -> None:
        """Take a card from the deck into the hand."""
        self._cards.append(self._deck.draw())

    def count(self) -> int:
        """Return the hand's points, counting each ace as 11 where that stays within 21."""
        total = 0
        aces = 0
        for card in self._cards:
            if card.value is Value.ACE:
                aces += 1
            elif card.value in _FACE_VALUES:
                total += 10
            else:
                total += int(card.value) + 1
        for _ in range(aces):
            total += 11 if total + 11 <= 21 else 1
        return total

    def reset(self) -> None:
        """Empty the hand for a new round."""
        self._cards.clear()

    def layout(
        self, card_width: float, screen_width: float = 900
    ) -> list[tuple[Card, tuple[float, float]]]:
        """Return each card with the centre point it is drawn at, in a row centred on screen."""
        offset = card_width + _CARD_GAP
        x = screen_width // 2 - (len(self._cards) * offset) / 2 + card_width / 2
        placed = []
        for card in self._cards:
            placed.append((card, (x, float(self.y))))
            x += offset
        return placed

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)