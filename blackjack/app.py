"""The windowed front end: menu screens, table drawing and the event loop."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

import pygame

from .card import Suit, Value
from .game import BlackJack, Button, Mode, MouseButtonDown, MouseMotion
from .hand import Hand
from .storage import load_float

SCREEN_W = 900
SCREEN_H = 600
FONT_SIZES = (12, 18, 24, 36, 48, 60, 72)

_GOLD = (218, 204, 0)
_WHITE = (255, 255, 255)
_HIGHLIGHT = (255, 255, 0)
_STACK_ORIGIN = (75, 225)
_STACK_OFFSET = 3
_STACK_DEPTH = 4
_DEALER_BACK = (415, 75)
_SHEET_COLUMNS = 13
_SHEET_ROWS = 5
_FPS = 60

_HOW_TO_LINES = (
    "BLACKJACK IS A POPULAR AMERICAN CASINO GAME, NOW FOUND THROUGHOUT THE WORLD.",
    "IT IS A BANKING GAME IN WHICH THE AIM OF THE PLAYER IS TO ACHIEVE A HAND",
    "WHOSE POINTS TOTAL NEARER TO 21 THAN THE BANKER'S HAND, BUT WITHOUT EXCEEDING 21.",
    "ALTHOUGH MANY PLAYERS MAY PLAY IN A SINGLE ROUND OF BLACKJACK, IT'S FUNDAMENTALLY A",
    "TWO-PLAYER GAME. IN BLACKJACK, PLAYERS DON'T PLAY AGAINST EACH OTHER; AND THEY DON'T",
    "CO-OPERATE. THE ONLY COMPETITION IS THE DEALER.",
    "THE AIM OF THE GAME IS TO ACCUMULATE A HIGHER POINT TOTAL THAN THE DEALER, BUT WITHOUT",
    "GOING OVER 21. YOU COMPUTE YOUR SCORE BY ADDING THE VALUES OF YOUR INDIVIDUAL CARDS.",
)

_INSTRUCTION_LINES = (
    "THERE IS GAMBLING IN THIS GAME, BUT IT IS NOT PUNISHABLE UNDER AACPS RULES DUE TO THE FACT THAT",
    "THERE IS NOT PROPERTY OR MONEY BEING GAMBLED BUT ONLY IN GAME IMAGINARY CURRENCY THAT CANNOT",
    "HARM ANYONE IN ANY WAY. YOU CAN PLAY THIS GAME UNLIMITEDLY, YOU PLAY EACH ROUND INDEPENDATLY",
    'OF EACH OTHERTHE GAME STARTS BY DEALING YOU A CARD, YOU PUSH THE BUTTON "HIT ME" OR "HOLD"',
    "YOU WILL CONTINUE TO HIT THESE BUTTONS UNTILL YOU BUST OR HOLD, ONCE YOU GET TO THAT POINT THE",
    "CARDS OF THE DEALER WILL BE SHOWN TO YOU AND YOU WILL SEE WHO WON, YOU OR THE DEALER. YOU WILL",
    "BE ABLE TO BET ON EACH ROUND, EVERY WIN IS 2X WHAT YOU PUT IN AND YOU GET 1/2 OF WHAT YOU PUT IN",
    "FOR A LOSS.",
)

_TICK = object()


class Screen(Enum):
    """Which page the window shows."""

    MAIN_MENU = auto()
    HOW_TO_BLACKJACK = auto()
    INSTRUCTIONS = auto()
    GAME = auto()
    FINAL_MENU = auto()


_NEXT_SCREEN = {
    Screen.MAIN_MENU: Screen.HOW_TO_BLACKJACK,
    Screen.HOW_TO_BLACKJACK: Screen.INSTRUCTIONS,
    Screen.INSTRUCTIONS: Screen.GAME,
    Screen.GAME: Screen.GAME,
    Screen.FINAL_MENU: Screen.FINAL_MENU,
}


def next_screen(screen: Screen) -> Screen:
    """Return the page a key press or click leads to from ``screen``."""
    return _NEXT_SCREEN[screen]


@dataclass
class Assets:
    """Images, fonts and music used by the window; missing images are None."""

    background: pygame.Surface | None
    button: pygame.Surface | None
    cards: pygame.Surface | None
    music: Path | None
    titles: list[pygame.font.Font]
    body: list[pygame.font.Font]


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        print(f"Failed to load {path} graphic!", file=sys.stderr)
        return None


def _load_fonts(path: Path) -> list[pygame.font.Font]:
    fonts = []
    for size in FONT_SIZES:
        try:
            fonts.append(pygame.font.Font(str(path), size))
        except (pygame.error, OSError):
            fonts.append(pygame.font.Font(None, size))
    return fonts


def load_assets(root: str | os.PathLike[str]) -> Assets:
    """Load everything from the ``res`` directory under ``root``."""
    pygame.font.init()
    res = Path(root) / "res"
    music: Path | None = res / "AprilShowers.ogg"
    if not music.is_file():
        print(f"Failed to load {music} audio!", file=sys.stderr)
        music = None
    return Assets(
        background=_load_image(res / "table.jpeg"),
        button=_load_image(res / "border.png"),
        cards=_load_image(res / "cards.png"),
        music=music,
        titles=_load_fonts(res / "CoffeeTin Initials.ttf"),
        body=_load_fonts(res / "Cowboy Movie.ttf"),
    )


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    colour: tuple[int, int, int],
    x: float,
    y: float,
    text: str,
) -> None:
    image = font.render(text, True, colour)
    surface.blit(image, image.get_rect(midtop=(round(x), round(y))))


def _card_size(sheet: pygame.Surface) -> tuple[int, int]:
    return sheet.get_width() // _SHEET_COLUMNS, sheet.get_height() // _SHEET_ROWS


def _draw_card(
    surface: pygame.Surface,
    sheet: pygame.Surface,
    suit: Suit,
    value: Value,
    centre: tuple[float, float],
) -> None:
    width, height = _card_size(sheet)
    area = pygame.Rect(int(value) * width, int(suit) * height, width, height)
    x, y = centre
    surface.blit(sheet, (round(x - width / 2), round(y - height / 2)), area)


def _draw_hand(surface: pygame.Surface, hand: Hand, sheet: pygame.Surface | None) -> None:
    if sheet is None:
        return
    width, _ = _card_size(sheet)
    for card, centre in hand.layout(width, SCREEN_W):
        _draw_card(surface, sheet, card.suit, card.value, centre)


def _draw_back(surface: pygame.Surface, sheet: pygame.Surface | None, centre: tuple[float, float]) -> None:
    if sheet is not None:
        _draw_card(surface, sheet, Suit.BACK, Value.ACE, centre)


def _draw_stack(surface: pygame.Surface, sheet: pygame.Surface | None) -> None:
    x, y = _STACK_ORIGIN
    for _ in range(_STACK_DEPTH):
        x += _STACK_OFFSET
        y += _STACK_OFFSET
        _draw_back(surface, sheet, (x, y))


def _draw_button(
    surface: pygame.Surface, assets: Assets, button: Button, label: str, active: bool
) -> None:
    rect = pygame.Rect(button.left, button.top, button.width, button.height)
    if assets.button is not None:
        surface.blit(pygame.transform.scale(assets.button, rect.size), rect.topleft)
    _draw_text(surface, assets.titles[2], _GOLD, button.left + 60, button.top + 25, label)
    if active:
        pygame.draw.rect(surface, _HIGHLIGHT, rect, 3)


def _draw_status(surface: pygame.Surface, game: BlackJack, assets: Assets) -> None:
    _draw_text(surface, assets.body[2], _GOLD, 450, 525, f"BANK ACCOUNT CONTAINS ${game.bank:.2f}")
    _draw_text(surface, assets.body[2], _GOLD, 100, 500, f"CARD TOTAL IS {game.player_hand.count()}")


def render_game(surface: pygame.Surface, game: BlackJack, assets: Assets) -> None:
    """Draw the table for the game's current mode onto ``surface``."""
    left_active = game.active_button is Button.LEFT
    right_active = game.active_button is Button.RIGHT
    if game.mode in (Mode.SETUP, Mode.INPUT):
        _draw_stack(surface, assets.cards)
        _draw_hand(surface, game.dealer_hand, assets.cards)
        _draw_back(surface, assets.cards, _DEALER_BACK)
        _draw_button(surface, assets, Button.LEFT, "H O L D", left_active)
        _draw_button(surface, assets, Button.RIGHT, "H I T", right_active)
        _draw_status(surface, game, assets)
        _draw_hand(surface, game.player_hand, assets.cards)
    elif game.mode is Mode.FINISH:
        _draw_stack(surface, assets.cards)
        _draw_button(surface, assets, Button.LEFT, "N E W", left_active)
        _draw_button(surface, assets, Button.RIGHT, "Q U I T", right_active)
        _draw_text(surface, assets.titles[5], _GOLD, 450, 225, game.conclusion)
        _draw_status(surface, game, assets)
        _draw_hand(surface, game.player_hand, assets.cards)
        _draw_hand(surface, game.dealer_hand, assets.cards)


def _draw_page(
    surface: pygame.Surface, assets: Assets, title: str, lines: tuple[str, ...]
) -> None:
    _draw_text(surface, assets.titles[6], _WHITE, SCREEN_W / 2, 25, title)
    for row, line in enumerate(lines):
        _draw_text(surface, assets.body[2], _WHITE, SCREEN_W / 2, 150 + 40 * row, line)


def _render_screen(
    surface: pygame.Surface, screen: Screen, game: BlackJack, assets: Assets
) -> None:
    surface.fill((0, 0, 0))
    if assets.background is not None:
        surface.blit(pygame.transform.scale(assets.background, (SCREEN_W, SCREEN_H)), (0, 0))
    if screen is Screen.MAIN_MENU:
        _draw_text(surface, assets.titles[6], _WHITE, SCREEN_W / 2, 25, "BLACK JACK")
        _draw_text(surface, assets.body[4], _WHITE, SCREEN_W / 2, 300, "CLICK ANYWHERE TO CONTINUE...")
    elif screen is Screen.HOW_TO_BLACKJACK:
        _draw_page(surface, assets, "WHAT IS BLACK JACK", _HOW_TO_LINES)
    elif screen is Screen.INSTRUCTIONS:
        _draw_page(surface, assets, "INSTRUCTIONS", _INSTRUCTION_LINES)
    elif screen is Screen.GAME:
        render_game(surface, game, assets)


def _translate(event: pygame.event.Event) -> object:
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        return MouseMotion(x, y)
    if event.type == pygame.MOUSEBUTTONDOWN:
        return MouseButtonDown(event.button)
    return event


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="blackjack", description="Play blackjack against the dealer.")
    parser.add_argument(
        "--root", type=Path, default=Path("."),
        help="directory holding res/ and Bank.txt (default: current directory)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        except pygame.error:
            print("Failed to create display!", file=sys.stderr)
            return 1
        pygame.display.set_caption("BlackJack")
        try:
            pygame.mixer.init()
        except pygame.error:
            print("Failed to initialize audio!", file=sys.stderr)
            return 1

        assets = load_assets(args.root)
        if assets.music is not None:
            try:
                pygame.mixer.music.load(str(assets.music))
                pygame.mixer.music.play(-1)
            except pygame.error:
                print(f"Failed to load {assets.music} audio!", file=sys.stderr)

        game = BlackJack(bank=load_float(args.root / "Bank.txt"))
        screen = Screen.MAIN_MENU
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if not game.executing:
                    running = False
                game.update(_translate(event))
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    screen = next_screen(screen)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    screen = next_screen(screen)
            game.update(_TICK)
            if not game.executing:
                running = False
            _render_screen(surface, screen, game, assets)
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())