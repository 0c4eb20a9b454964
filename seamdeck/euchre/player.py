"""Euchre players: a rule-based computer player and an interactive human player."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from functools import reduce
from typing import Callable, Iterable, TextIO

from seamdeck.euchre.card import Card, Suit, card_less, string_to_suit, suit_next


def _highest(cards: Iterable[Card], less: Callable[[Card, Card], bool]) -> Card:
    """The first card that no later card beats under ``less``."""
    return reduce(lambda best, card: card if less(best, card) else best, cards)


def _lowest(cards: Iterable[Card], less: Callable[[Card, Card], bool]) -> Card:
    """The first card that no later card undercuts under ``less``."""
    return reduce(lambda low, card: card if less(card, low) else low, cards)


class Player(ABC):
    """A named euchre player holding a hand of cards."""

    MAX_HAND_SIZE = 5

    def __init__(self, name: str) -> None:
        self.name = name
        self._hand: list[Card] = []

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def _require_cards(self) -> None:
        if not self._hand:
            raise IndexError(f"{self.name} has no cards")

    @abstractmethod
    def add_card(self, card: Card) -> None:
        """Add ``card`` to the hand."""

    @abstractmethod
    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        """Return the suit the player orders up as trump, or None to pass."""

    @abstractmethod
    def add_and_discard(self, upcard: Card) -> None:
        """Pick up the upcard and discard one card, or leave the hand as it is."""

    @abstractmethod
    def lead_card(self, trump: Suit) -> Card:
        """Remove and return the card that opens a trick."""

    @abstractmethod
    def play_card(self, led_card: Card, trump: Suit) -> Card:
        """Remove and return the card played in answer to ``led_card``."""


class SimplePlayer(Player):
    """A computer player following a fixed strategy."""

    def add_card(self, card: Card) -> None:
        """Add ``card`` to the end of the hand."""
        self._hand.append(card)

    def _count_trump_faces(self, trump: Suit) -> int:
        return sum(
            1 for card in self._hand
            if card.is_face_or_ace() and card.suit_under(trump) == trump
        )

    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        """Order up on two trump face cards in round one; in round two the
        dealer always orders the next suit, others need one face card of it."""
        if round_number == 1:
            if self._count_trump_faces(upcard.suit) > 1:
                return upcard.suit
            return None
        if round_number == 2:
            next_suit = suit_next(upcard.suit)
            if is_dealer or self._count_trump_faces(next_suit) >= 1:
                return next_suit
            return None
        raise ValueError(f"round must be 1 or 2, not {round_number}")

    def add_and_discard(self, upcard: Card) -> None:
        """Swap the weakest card for the upcard unless the upcard is weaker still."""
        self._require_cards()
        trump = upcard.suit
        lowest = _lowest(self._hand, lambda a, b: card_less(a, b, trump))
        if not card_less(upcard, lowest, trump):
            self._hand.remove(lowest)
            self.add_card(upcard)

    def lead_card(self, trump: Suit) -> Card:
        """Lead the highest non-trump card, or the highest trump if that is all."""
        self._require_cards()
        plain = [card for card in self._hand if card.suit_under(trump) != trump]
        candidates = plain or self._hand
        chosen = _highest(candidates, lambda a, b: card_less(a, b, trump))
        self._hand.remove(chosen)
        return chosen

    def play_card(self, led_card: Card, trump: Suit) -> Card:
        """Follow suit with the highest card possible, else throw the lowest."""
        self._require_cards()
        led_suit = led_card.suit_under(trump)

        def less(a: Card, b: Card) -> bool:
            return card_less(a, b, trump, led_card)

        following = [card for card in self._hand if card.suit_under(trump) == led_suit]
        chosen = _highest(following, less) if following else _lowest(self._hand, less)
        self._hand.remove(chosen)
        return chosen


class HumanPlayer(Player):
    """A player whose decisions are read from an input stream.

    Prompts and the sorted hand are written to the output stream. Answers are
    whitespace-separated words; by default the standard streams are used.
    """

    def __init__(
        self,
        name: str,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        super().__init__(name)
        self._input = input_stream
        self._output = output_stream
        self._pending: deque[str] = deque()

    def _write(self, text: str) -> None:
        (self._output or sys.stdout).write(text)

    def _read_word(self) -> str:
        stream = self._input or sys.stdin
        while not self._pending:
            line = stream.readline()
            if not line:
                raise EOFError(f"no answer from human player {self.name}")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _read_index(self) -> int:
        word = self._read_word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not a card number: {word!r}") from None

    def _print_hand(self) -> None:
        for index, card in enumerate(self._hand):
            self._write(f"Human player {self.name}'s hand: [{index}] {card}\n")

    def _take(self, index: int) -> Card:
        if not 0 <= index < len(self._hand):
            raise IndexError(f"no card number {index} in a hand of {len(self._hand)}")
        return self._hand.pop(index)

    def add_card(self, card: Card) -> None:
        """Add ``card`` and keep the hand sorted."""
        self._hand.append(card)
        self._hand.sort()

    def make_trump(self, upcard: Card, is_dealer: bool, round_number: int) -> Suit | None:
        """Ask for a suit to order up, or ``pass``."""
        self._print_hand()
        self._write(f'Human player {self.name}, please enter a suit, or "pass":\n')
        decision = self._read_word()
        if decision == "pass":
            return None
        return string_to_suit(decision)

    def add_and_discard(self, upcard: Card) -> None:
        """Ask which card to discard for the upcard; -1 discards the upcard."""
        self._print_hand()
        self._write("Discard upcard: [-1]\n")
        self._write(f"Human player {self.name}, please select a card to discard:\n")
        index = self._read_index()
        if index != -1:
            self._take(index)
            self.add_card(upcard)

    def _select_card(self) -> Card:
        self._print_hand()
        self._write(f"Human player {self.name}, please select a card:\n")
        return self._take(self._read_index())

    def lead_card(self, trump: Suit) -> Card:
        """Ask which card to lead."""
        return self._select_card()

    def play_card(self, led_card: Card, trump: Suit) -> Card:
        """Ask which card to play."""
        return self._select_card()


def player_factory(name: str, strategy: str) -> Player:
    """Create a player of the given strategy, ``"Simple"`` or ``"Human"``."""
    if strategy == "Simple":
        return SimplePlayer(name)
    if strategy == "Human":
        return HumanPlayer(name)
    raise ValueError(f"unknown player strategy: {strategy!r}")