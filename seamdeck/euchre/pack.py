"""A 24-card euchre pack that deals from the top."""

from __future__ import annotations

from typing import Iterable, TextIO

from seamdeck.euchre.card import Card, Rank, Suit, string_to_rank, string_to_suit

PACK_SIZE = 24
_SHUFFLE_ROUNDS = 7


class Pack:
    """An ordered pack of 24 cards with a position for the next card to deal.

    Without cards, the pack is in standard order: each suit from lowest to
    highest, Nine through Ace within each suit.
    """

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        if cards is None:
            cards = (
                Card(rank, suit)
                for suit in Suit
                for rank in Rank
                if rank >= Rank.NINE
            )
        self._cards = list(cards)
        if len(self._cards) != PACK_SIZE:
            raise ValueError(f"a pack holds {PACK_SIZE} cards, not {len(self._cards)}")
        self._next = 0

    @classmethod
    def from_stream(cls, stream: TextIO) -> Pack:
        """Read a pack of cards written as ``<Rank> of <Suit>``, separated by whitespace."""
        words = stream.read().split()
        if len(words) % 3:
            raise ValueError("pack data does not consist of whole cards")
        groups = iter(words)
        return cls(
            Card(string_to_rank(rank), string_to_suit(suit))
            for rank, _, suit in zip(groups, groups, groups)
        )

    def deal_one(self) -> Card:
        """Return the next card and advance past it."""
        if self.empty():
            raise IndexError("no cards left in the pack")
        card = self._cards[self._next]
        self._next += 1
        return card

    def reset(self) -> None:
        """Start dealing again from the first card."""
        self._next = 0

    def shuffle(self) -> None:
        """Perform seven in-shuffles, then reset to the first card."""
        half = PACK_SIZE // 2
        for _ in range(_SHUFFLE_ROUNDS):
            shuffled: list[Card] = [Card()] * PACK_SIZE
            shuffled[1::2] = self._cards[:half]
            shuffled[0::2] = self._cards[half:]
            self._cards = shuffled
        self.reset()

    def empty(self) -> bool:
        """Whether every card has been dealt."""
        return self._next == PACK_SIZE