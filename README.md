# blackjack

A single-player blackjack game played with the mouse against a dealer.
The table shows your hand, the dealer's first card and your bank
balance; you click **HOLD** to stand or **HIT** to take another card.
When the round ends the dealer draws until the hand is worth more than
15, the result (`YOU WIN`, `YOU LOSE` or `TIE`) is shown, and you can
start a **NEW** round or **QUIT**.

## Installing

```
pip install .
```

## Playing

```
blackjack
blackjack --root path/to/game/files
```

The game opens a 900×600 window. Click anywhere (or press a key) to go
from the title screen through the rules and instructions pages to the
table. Press Escape or close the window to leave at any time.

Images, fonts and music are read from a `res` directory under the
`--root` directory (the current directory by default):

- `res/table.jpeg` – table background
- `res/cards.png` – card sheet, 13 columns by 5 rows (the last row holds the card back)
- `res/border.png` – button border
- `res/CoffeeTin Initials.ttf` and `res/Cowboy Movie.ttf` – fonts
- `res/AprilShowers.ogg` – background music, played in a loop

Missing images and music are reported on standard error and left out;
missing fonts fall back to pygame's default font. The opening bank
balance is read from `Bank.txt` under the same directory (the first
non-zero number in the file, or 0 if there is none).

## Scoring

- Number cards count their face value.
- Jack, queen and king count 10.
- Each ace counts 11 when that keeps the hand at 21 or less, otherwise 1.
- A player hand over 21 is bust and loses.
- Otherwise the higher total wins and equal totals tie.
- A bust dealer loses to any player hand of 21 or less.
- A win adds twice the bet to the bank; a loss takes the bet away.

The deck holds one card of each value in diamonds, hearts and spades and
is reshuffled at the start of every round.

## What it does not do

- There is no way to place a bet in the window: the bet is 0 each
  round, so the bank balance does not change during play.
- The bank balance is read from `Bank.txt` at start-up but never
  written back.

## Using the pieces

The game logic works without a window and can be driven directly with
`MouseMotion` and `MouseButtonDown` events:

```python
import random

from blackjack.deck import Deck
from blackjack.game import BlackJack, Mode, MouseButtonDown, MouseMotion

game = BlackJack(Deck(random.Random(1)), bank=100.0)
game.update(MouseMotion(0, 0))      # the first event deals the round
game.update(MouseMotion(760, 80))   # pointer over the HIT button
game.update(MouseButtonDown())      # take a card
if game.mode is not Mode.FINISH:
    game.hold()                      # stand
    game.compute()                   # dealer plays, bet is settled
print(game.outcome, game.conclusion, game.bank)
```

- `blackjack.card` – `Card`, `Suit`, `Value`, `int_to_suit`, `int_to_value`.
- `blackjack.deck` – `Deck` (`shuffle()`, `draw()`), raising
  `DeckExhaustedError` when ten random picks find no unplayed card.
- `blackjack.hand` – `Hand` with `draw()`, `count()` (the blackjack
  value), `reset()` and `layout()` (where each card is drawn).
- `blackjack.game` – `BlackJack`, `Mode`, `Outcome`, `Button` and
  `button_at(x, y)`.
- `blackjack.storage` – `load_float` and `save_float` for a number kept
  in a text file.
- `blackjack.app` – the window: `main`, `load_assets`, `render_game`,
  `Screen` and `next_screen`.

## Running the tests

```
pip install .[test]
pytest
```