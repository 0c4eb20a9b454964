"""A four-player euchre game and the command that runs it."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from seamdeck.euchre.card import Card, Suit, card_less
from seamdeck.euchre.pack import Pack
from seamdeck.euchre.player import Player, player_factory

PROGRAM = "euchre"
USAGE = (
    f"Usage: {PROGRAM} PACK_FILENAME [shuffle|noshuffle] "
    "POINTS_TO_WIN NAME1 TYPE1 NAME2 TYPE2 NAME3 TYPE3 "
    "NAME4 TYPE4"
)
_PLAYER_COUNT = 4
_TRICKS_PER_HAND = 5
_STRATEGIES = ("Simple", "Human")


class Game:
    """Four players in two partnerships: seats 0 and 2 against seats 1 and 3.

    Each call to :meth:`play_hand` plays one hand and reports its progress
    to the output stream (standard output by default).
    """

    def __init__(
        self,
        players: Iterable[Player],
        pack: Pack,
        shuffle: bool = False,
        output: TextIO | None = None,
    ) -> None:
        self._players = list(players)
        if len(self._players) != _PLAYER_COUNT:
            raise ValueError(f"euchre needs {_PLAYER_COUNT} players, not {len(self._players)}")
        self._pack = pack
        self._shuffle = shuffle
        self._output = output
        self._points = [0, 0]
        self._tricks = [0] * _PLAYER_COUNT
        self._dealer = 0
        self._leader = 0
        self._trump_maker = 0
        self._hand_number = 0
        self._upcard = Card()
        self._trump = Suit.SPADES

    @property
    def points(self) -> tuple[int, int]:
        """Points of the two partnerships, seats 0/2 first."""
        return self._points[0], self._points[1]

    def _say(self, text: str) -> None:
        (self._output or sys.stdout).write(text + "\n")

    def _seat(self, index: int) -> Player:
        return self._players[index % _PLAYER_COUNT]

    def _deal(self) -> None:
        self._say(f"{self._seat(self._dealer)} deals")
        for counts in ((3, 2, 3, 2), (2, 3, 2, 3)):
            for offset, count in enumerate(counts, start=1):
                player = self._seat(self._dealer + offset)
                for _ in range(count):
                    player.add_card(self._pack.deal_one())
        self._upcard = self._pack.deal_one()
        self._trump = self._upcard.suit
        self._say(f"{self._upcard} turned up")

    def _announce_trump(self, seat: int, suit: Suit) -> None:
        self._trump = suit
        self._trump_maker = seat % _PLAYER_COUNT
        self._say(f"{self._seat(seat)} orders up {suit}\n")

    def _make_trump(self) -> None:
        leader = self._dealer + 1
        self._leader = leader
        for round_number in (1, 2):
            for seat in range(leader, leader + _PLAYER_COUNT):
                player = self._seat(seat)
                is_dealer = seat % _PLAYER_COUNT == self._dealer
                choice = player.make_trump(self._upcard, is_dealer, round_number)
                if choice is not None:
                    self._announce_trump(seat, choice)
                    if round_number == 1:
                        self._seat(self._dealer).add_and_discard(self._upcard)
                    return
                if round_number == 1 or seat < leader + _PLAYER_COUNT - 1:
                    self._say(f"{player} passes")
        # The dealer declined in round two: the upcard's suit stands.
        self._announce_trump(self._dealer, self._upcard.suit)

    def _play_trick(self) -> None:
        leader = self._leader % _PLAYER_COUNT
        led = self._seat(leader).lead_card(self._trump)
        self._say(f"{led} led by {self._seat(leader)}")
        trick = {leader: led}
        followers = [seat % _PLAYER_COUNT for seat in range(leader + 1, leader + _PLAYER_COUNT)]
        for seat in followers:
            card = self._seat(seat).play_card(led, self._trump)
            trick[seat] = card
            self._say(f"{card} played by {self._seat(seat)}")
        winner = leader
        for seat in followers:
            if card_less(trick[winner], trick[seat], self._trump, led):
                winner = seat
        self._tricks[winner] += 1
        self._leader = winner
        self._say(f"{self._seat(winner)} takes the trick\n")

    def _score(self) -> None:
        taken = (self._tricks[0] + self._tricks[2], self._tricks[1] + self._tricks[3])
        team = 0 if taken[0] > taken[1] else 1
        self._say(f"{self._seat(team)} and {self._seat(team + 2)} win the hand")
        if self._trump_maker % 2 == team:
            self._points[team] += 1
            if taken[team] == _TRICKS_PER_HAND:
                self._points[team] += 1
                self._say("march!")
        else:
            self._points[team] += 2
            self._say("euchred!")
        self._say(f"{self._seat(0)} and {self._seat(2)} have {self._points[0]} points")
        self._say(f"{self._seat(1)} and {self._seat(3)} have {self._points[1]} points\n")
        self._tricks = [0] * _PLAYER_COUNT

    def play_hand(self) -> None:
        """Shuffle or reset the pack, deal, make trump, play five tricks and score."""
        if self._shuffle:
            self._pack.shuffle()
        else:
            self._pack.reset()
        self._say(f"Hand {self._hand_number}")
        self._deal()
        self._make_trump()
        self._leader = self._dealer + 1
        for _ in range(_TRICKS_PER_HAND):
            self._play_trick()
        self._score()
        self._hand_number += 1
        self._dealer = (self._dealer + 1) % _PLAYER_COUNT


def main(argv: Sequence[str] | None = None) -> int:
    """Play euchre until one partnership reaches the points to win."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 11:
        print(USAGE)
        return 1
    try:
        points_to_win = int(args[2])
    except ValueError:
        print(USAGE)
        return 1
    if not 1 <= points_to_win <= 100:
        print(USAGE)
        return 1
    shuffle_mode = args[1]
    if shuffle_mode not in ("shuffle", "noshuffle"):
        print(USAGE)
        return 1
    names, strategies = args[3:11:2], args[4:11:2]
    if any(strategy not in _STRATEGIES for strategy in strategies):
        print(USAGE)
        return 1

    filename = args[0]
    try:
        with open(filename, encoding="utf-8") as source:
            pack = Pack.from_stream(source)
    except OSError:
        print(f"Error opening {filename}")
        return 1
    except ValueError as exc:
        print(f"Error reading {filename}: {exc}")
        return 1

    print(" ".join([PROGRAM, *args]) + " ")

    players = [player_factory(name, strategy) for name, strategy in zip(names, strategies)]
    game = Game(players, pack, shuffle_mode == "shuffle")
    while (
        (points_to_win > game.points[0] and points_to_win > game.points[1])
        or game.points[0] == game.points[1]
    ):
        game.play_hand()

    team = 0 if game.points[0] > game.points[1] else 1
    print(f"{players[team]} and {players[team + 2]} win!")
    return 0


if __name__ == "__main__":
    sys.exit(main())