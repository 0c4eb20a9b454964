"""Playing cards for euchre: ranks, suits and trump-aware ordering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Rank(IntEnum):
    """Card rank, ordered from lowest to highest."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    def __str__(self) -> str:
        return self.name.capitalize()


class Suit(IntEnum):
    """Card suit, ordered from lowest to highest."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    def __str__(self) -> str:
        return self.name.capitalize()


_RANKS_BY_NAME = {str(rank): rank for rank in Rank}
_SUITS_BY_NAME = {str(suit): suit for suit in Suit}

_NEXT_SUIT = {
    Suit.SPADES: Suit.CLUBS,
    Suit.CLUBS: Suit.SPADES,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.HEARTS: Suit.DIAMONDS,
}


def string_to_rank(text: str) -> Rank:
    """Return the rank named by ``text``, such as ``"Two"`` or ``"Ace"``."""
    try:
        return _RANKS_BY_NAME[text]
    except KeyError:
        raise ValueError(f"not a rank: {text!r}") from None


def string_to_suit(text: str) -> Suit:
    """Return the suit named by ``text``, such as ``"Spades"``."""
    try:
        return _SUITS_BY_NAME[text]
    except KeyError:
        raise ValueError(f"not a suit: {text!r}") from None


def suit_next(suit: Suit) -> Suit:
    """Return the other suit of the same colour."""
    return _NEXT_SUIT[Suit(suit)]


@dataclass(frozen=True)
class Card:
    """A playing card; the default card is the Two of Spades.

    Plain comparisons ignore trump: rank first, then suit.
    """

    rank: Rank = Rank.TWO
    suit: Suit = Suit.SPADES

    @classmethod
    def parse(cls, text: str) -> Card:
        """Read a card written as ``"<Rank> of <Suit>"``."""
        words = text.split()
        if len(words) != 3:
            raise ValueError(f"not a card: {text!r}")
        return cls(string_to_rank(words[0]), string_to_suit(words[2]))

    def suit_under(self, trump: Suit) -> Suit:
        """Return the card's suit, counting the left bower as trump."""
        return trump if self.is_left_bower(trump) else self.suit

    def is_face_or_ace(self) -> bool:
        """Whether the card is a Jack, Queen, King or Ace."""
        return self.rank >= Rank.JACK

    def is_right_bower(self, trump: Suit) -> bool:
        """Whether the card is the Jack of the trump suit."""
        return self.rank == Rank.JACK and self.suit == trump

    def is_left_bower(self, trump: Suit) -> bool:
        """Whether the card is the Jack of the same-colour suit as trump."""
        return self.rank == Rank.JACK and self.suit == suit_next(trump)

    def is_trump(self, trump: Suit) -> bool:
        """Whether the card is of the trump suit or is the left bower."""
        return self.suit == trump or self.is_left_bower(trump)

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def _key(self) -> tuple[int, int]:
        return (int(self.rank), int(self.suit))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._key() >= other._key()


def _trump_order(a: Card, b: Card, trump: Suit) -> bool | None:
    """Decide ``a < b`` from trump alone; None when neither card is trump."""
    a_trump, b_trump = a.is_trump(trump), b.is_trump(trump)
    if a_trump and b_trump:
        if a.is_right_bower(trump):
            return False
        if b.is_right_bower(trump):
            return True
        if a.is_left_bower(trump):
            return False
        if b.is_left_bower(trump):
            return True
        return a < b
    if a_trump:
        return False
    if b_trump:
        return True
    return None


def card_less(a: Card, b: Card, trump: Suit, led_card: Card | None = None) -> bool:
    """Whether ``a`` ranks below ``b`` given trump and, optionally, the led card.

    Trump beats everything, with the right bower highest and the left bower
    next. When a led card is given and it is not trump, cards of the led suit
    beat the remaining non-trump cards.
    """
    if a == b:
        return False
    decided = _trump_order(a, b, trump)
    if decided is not None:
        return decided
    if led_card is not None and not led_card.is_trump(trump):
        a_led = a.suit == led_card.suit
        b_led = b.suit == led_card.suit
        if a_led and not b_led:
            return False
        if b_led and not a_led:
            return True
    return a < b