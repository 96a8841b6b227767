"""Round logic for a single-player blackjack table, driven by pointer events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .deck import Deck
from .hand import Hand

_BLACKJACK = 21
_DEALER_STANDS_ABOVE = 15
_PLAYER_HAND_Y = 400
_DEALER_HAND_Y = 75


class Mode(Enum):
    """Stage of the current round."""

    SETUP = auto()
    INPUT = auto()
    COMPUTE = auto()
    FINISH = auto()


class Outcome(Enum):
    """Result of a round, carrying the line shown to the player."""

    UNKNOWN = "UNKNOWN"
    WIN = "YOU WIN"
    LOSS = "YOU LOSE"
    TIE = "TIE"

    @property
    def conclusion(self) -> str:
        return self.value


class Button(Enum):
    """The two on-screen buttons as (left, top, width, height) rectangles.

    The left one holds during a round and starts a new round afterwards;
    the right one hits during a round and quits afterwards.
    """

    LEFT = (75, 50, 125, 75)
    RIGHT = (700, 50, 125, 75)

    @property
    def left(self) -> int:
        return self.value[0]

    @property
    def top(self) -> int:
        return self.value[1]

    @property
    def width(self) -> int:
        return self.value[2]

    @property
    def height(self) -> int:
        return self.value[3]

    def contains(self, x: float, y: float) -> bool:
        """Return whether the point lies on the button, edges included."""
        return (
            self.left <= x <= self.left + self.width
            and self.top <= y <= self.top + self.height
        )


def button_at(x: float, y: float) -> Button | None:
    """Return the button under the point, or None if there is none."""
    return next((button for button in Button if button.contains(x, y)), None)


@dataclass(frozen=True)
class MouseMotion:
    """The pointer moved to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseButtonDown:
    """A mouse button was pressed."""

    button: int = 1


class BlackJack:
    """One player against the dealer, with a bank account and a bet per round."""

    def __init__(self, deck: Deck | None = None, bank: float = 0.0) -> None:
        self.deck = deck if deck is not None else Deck()
        self.player_hand = Hand(self.deck, _PLAYER_HAND_Y)
        self.dealer_hand = Hand(self.deck, _DEALER_HAND_Y)
        self.bank = float(bank)
        self.bet = 0.0
        self.mode = Mode.SETUP
        self.outcome = Outcome.UNKNOWN
        self.conclusion = ""
        self.holding = False
        self.executing = True
        self.active_button: Button | None = None

    def update(self, event: object) -> None:
        """Advance the round in response to an event; any event starts a pending round."""
        if self.mode is Mode.SETUP:
            self._deal()
            return
        if self.mode is Mode.FINISH:
            self._update_finished(event)
            return
        if self.mode is Mode.INPUT:
            self._track_pointer(event)
            if isinstance(event, MouseButtonDown):
                pressed = self.active_button
                if pressed is Button.LEFT:
                    self.active_button = None
                    self.hold()
                elif pressed is Button.RIGHT:
                    self.active_button = None
                    self.hit()
        if self.player_hand.count() > _BLACKJACK or self.holding:
            self.compute()
        else:
            self.mode = Mode.INPUT

    def hit(self) -> None:
        """Give the player another card."""
        self.player_hand.draw()
        self.mode = Mode.COMPUTE

    def hold(self) -> None:
        """Stand on the player's current hand."""
        self.holding = True
        self.mode = Mode.FINISH

    def compute(self) -> None:
        """Play out the dealer's hand, settle the bet and finish the round."""
        while self.dealer_hand.count() <= _DEALER_STANDS_ABOVE:
            self.dealer_hand.draw()

        player = self.player_hand.count()
        dealer = self.dealer_hand.count()
        if player > _BLACKJACK:
            outcome = Outcome.LOSS
        elif player > dealer:
            outcome = Outcome.WIN
        elif player == dealer:
            outcome = Outcome.TIE
        elif dealer > _BLACKJACK:
            outcome = Outcome.WIN
        else:
            outcome = Outcome.LOSS

        if outcome is Outcome.WIN:
            self.bank += 2 * self.bet
        elif outcome is Outcome.LOSS:
            self.bank -= self.bet
        self.outcome = outcome
        self.conclusion = outcome.conclusion
        self.mode = Mode.FINISH

    def _deal(self) -> None:
        self.conclusion = ""
        self.bet = 0.0
        self.deck.shuffle()
        self.player_hand.reset()
        self.dealer_hand.reset()
        self.player_hand.draw()
        self.player_hand.draw()
        self.dealer_hand.draw()
        self.outcome = Outcome.UNKNOWN
        self.holding = False
        self.mode = Mode.INPUT

    def _track_pointer(self, event: object) -> None:
        if isinstance(event, MouseMotion):
            self.active_button = button_at(event.x, event.y)

    def _update_finished(self, event: object) -> None:
        self._track_pointer(event)
        if not isinstance(event, MouseButtonDown):
            return
        if self.active_button is Button.LEFT:
            self.active_button = None
            self.mode = Mode.SETUP
        elif self.active_button is Button.RIGHT:
            self.executing = False