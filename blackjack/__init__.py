"""A mouse-driven blackjack game against a dealer, with a bank balance read from a file."""

__version__ = "0.1.0"