import io

import pytest

from seamdeck.euchre.game import USAGE, Game, main
from seamdeck.euchre.pack import Pack
from seamdeck.euchre.player import SimplePlayer

NAMES = ("Alice", "Bob", "Cathy", "Dan")


def _players():
    return [SimplePlayer(name) for name in NAMES]


def _play_one(shuffle=False):
    out = io.StringIO()
    game = Game(_players(), Pack(), shuffle, out)
    game.play_hand()
    return game, out.getvalue().splitlines()


def _pack_file(tmp_path):
    pack = Pack()
    cards = [pack.deal_one() for _ in range(24)]
    path = tmp_path / "pack.in"
    path.write_text("\n".join(str(card) for card in cards) + "\n")
    return path


def _args(pack_path, shuffle="noshuffle", points="3", types=("Simple",) * 4):
    args = [str(pack_path), shuffle, points]
    for name, kind in zip(NAMES, types):
        args += [name, kind]
    return args


def test_game_needs_four_players():
    with pytest.raises(ValueError):
        Game(_players()[:3], Pack(), False, io.StringIO())


def test_first_hand_header():
    _, lines = _play_one()
    assert lines[0] == "Hand 0"
    assert lines[1] == "Alice deals"
    assert lines[2] == "Jack of Diamonds turned up"


def test_hand_plays_five_tricks():
    _, lines = _play_one()
    assert sum("led by" in line for line in lines) == 5
    assert sum("played by" in line for line in lines) == 15
    assert sum("takes the trick" in line for line in lines) == 5
    assert sum("orders up" in line for line in lines) == 1
    assert sum("win the hand" in line for line in lines) == 1


def test_hand_awards_points():
    game, lines = _play_one(shuffle=True)
    assert sum(game.points) in (1, 2)
    assert f"Alice and Cathy have {game.points[0]} points" in lines
    assert f"Bob and Dan have {game.points[1]} points" in lines


def test_dealer_rotates():
    out = io.StringIO()
    game = Game(_players(), Pack(), False, out)
    game.play_hand()
    game.play_hand()
    lines = out.getvalue().splitlines()
    assert "Hand 1" in lines
    assert lines[lines.index("Hand 1") + 1] == "Bob deals"


def test_main_wrong_argument_count(capsys):
    assert main(["pack.in", "noshuffle"]) == 1
    assert capsys.readouterr().out == USAGE + "\n"


@pytest.mark.parametrize("points", ["0", "101", "many"])
def test_main_bad_points(tmp_path, capsys, points):
    assert main(_args(_pack_file(tmp_path), points=points)) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_bad_shuffle_mode(tmp_path, capsys):
    assert main(_args(_pack_file(tmp_path), shuffle="maybe")) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_bad_player_type(tmp_path, capsys):
    types = ("Simple", "Robot", "Simple", "Simple")
    assert main(_args(_pack_file(tmp_path), types=types)) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_missing_pack(tmp_path, capsys):
    missing = tmp_path / "absent.in"
    assert main(_args(missing)) == 1
    assert capsys.readouterr().out == f"Error opening {missing}\n"


def test_main_plays_to_the_end(tmp_path, capsys):
    args = _args(_pack_file(tmp_path), shuffle="shuffle", points="5")
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " ".join(["euchre", *args]) + " "
    assert lines[1] == "Hand 0"
    team0 = [line for line in lines if line.startswith("Alice and Cathy have")][-1]
    team1 = [line for line in lines if line.startswith("Bob and Dan have")][-1]
    score0, score1 = int(team0.split()[4]), int(team1.split()[4])
    assert score0 != score1
    assert max(score0, score1) >= 5
    winners = "Alice and Cathy" if score0 > score1 else "Bob and Dan"
    assert lines[-1] == f"{winners} win!"


def test_main_is_deterministic(tmp_path, capsys):
    args = _args(_pack_file(tmp_path), points="4")
    assert main(args) == 0
    first = capsys.readouterr().out
    assert main(args) == 0
    assert capsys.readouterr().out == first