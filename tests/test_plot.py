import math

import pytest

from conftest import play_until_lost
from game.board import Board
from plot.plot import compute_game_stats, load_games, main


def _save_games(tmp_path):
    won_in_one = Board(secret="RRBG")
    won_in_one.make_guess("RRBG")
    won_in_one.save(tmp_path / "g1.json")

    won_in_three = Board(secret="RRBG")
    for guess in ("WWWW", "KKKK", "RRBG"):
        won_in_three.make_guess(guess)
    won_in_three.save(tmp_path / "g2.json")

    lost = play_until_lost(Board(rules={"max_attempts": 4}, secret="RRBG"))
    lost.save(tmp_path / "g3.json")

    unfinished = Board(secret="RRBG")
    unfinished.make_guess("WWWW")
    unfinished.save(tmp_path / "g4.json")


def test_load_games_skips_unfinished_and_broken(tmp_path, capsys):
    _save_games(tmp_path)
    (tmp_path / "broken.json").write_text("{", encoding="utf-8")

    games = load_games([str(tmp_path / "*.json")])
    assert len(games) == 3
    out = capsys.readouterr().out
    assert "game not finished" in out
    assert "broken.json" in out


def test_compute_game_stats(tmp_path):
    _save_games(tmp_path)
    stats = compute_game_stats(load_games([str(tmp_path / "g*.json")]))
    assert stats["n_games"] == 3
    assert stats["n_won"] == 2
    assert math.isclose(stats["win_rate"], 2 / 3)
    assert stats["avg_attempts"] == 2.0
    assert stats["min_attempts"] == 1.0
    assert stats["max_attempts"] == 3.0
    assert stats["histogram"] == {1: 1, 3: 1}


def test_compute_game_stats_without_wins():
    stats = compute_game_stats([])
    assert stats["n_games"] == 0
    assert math.isnan(stats["win_rate"])
    assert math.isnan(stats["avg_attempts"])
    assert stats["histogram"] == {}


def test_main_writes_histogram(tmp_path, capsys):
    _save_games(tmp_path)
    outdir = tmp_path / "results"
    assert main([str(tmp_path / "g*.json"), "--outdir", str(outdir)]) == 0
    assert (outdir / "attempts_histogram.png").exists()
    assert "Win rate: 66.67%" in capsys.readouterr().out


def test_main_without_games(tmp_path):
    assert main([str(tmp_path / "none*.json"), "--outdir", str(tmp_path)]) == 1


@pytest.mark.parametrize(
    "content",
    [
        '{"is_over": true, "is_won": true, "guesses": [{}], "rules": {}}',
        '{"is_over": true, "is_won": true, "guesses": null, "rules": {},'
        ' "secret_code": ["R", "R", "B", "G"]}',
        '{"is_over": true, "is_won": true, "guesses": [], "rules": {},'
        ' "secret_code": ["R", "R", "B", "G"]}',
    ],
)
def test_malformed_records_are_skipped(tmp_path, capsys, content):
    _save_games(tmp_path)
    (tmp_path / "g5.json").write_text(content, encoding="utf-8")

    games = load_games([str(tmp_path / "g*.json")])
    assert len(games) == 3
    assert "g5.json" in capsys.readouterr().out

    outdir = tmp_path / "results"
    assert main([str(tmp_path / "g*.json"), "--outdir", str(outdir)]) == 0
