import random
from pathlib import Path

import pytest
from packages.datasets import WordListError, WordSource
from packages.engine import RejectionReason
from packages.game import GameConfig, GameController
from packages.lexicon import create_checker

ROOTS = ["silkworm", "elephant", "notebook"]
DICTIONARY = ["worms", "silk", "milk", "work", "plant", "book", "token"]


def _game(**config) -> GameController:
    return GameController(
        GameConfig(**config),
        source=WordSource(["silkworm"], random.Random(1)),
        checker=create_checker("wordlist", words=DICTIONARY),
    )


def test_starts_with_fresh_state():
    game = _game()
    assert game.root == "silkworm"
    assert game.history == () and game.score == 0
    assert game.games_played == 1


def test_submit_updates_state_and_log():
    game = _game()
    r = game.submit("Worms")
    assert r.accepted
    assert game.history == ("worms",)
    assert game.score == 5

    r = game.submit("wormss")
    assert r.rejection.reason is RejectionReason.NOT_POSSIBLE
    assert game.score == 5

    assert [a["accepted"] for a in game.attempts] == [True, False]
    assert game.attempts[1]["reason"] == "not_possible"
    assert game.attempts[0]["score"] == 5


def test_restart_twice_gives_empty_game():
    game = _game()
    game.submit("worms")
    game.submit("silk")
    first = game.restart()
    second = game.restart()
    assert first.history == second.history == ()
    assert first.score == second.score == 0
    assert game.games_played == 3


def test_word_can_be_reused_after_restart():
    game = _game()
    assert game.submit("worms").accepted
    assert game.submit("worms").rejection.reason is RejectionReason.ALREADY_USED
    game.restart()
    assert game.submit("worms").accepted


def test_score_mode_from_config():
    assert _game().submit(" worms ").points == 7
    assert _game(score_mode="normalized").submit(" worms ").points == 5


def test_seeded_games_pick_same_roots(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n".join(ROOTS) + "\n", encoding="utf-8")
    checker = create_checker("wordlist", words=DICTIONARY)

    def roots(seed):
        game = GameController(GameConfig(wordlist=p, seed=seed), checker=checker)
        picked = [game.root]
        for _ in range(5):
            picked.append(game.restart().root)
        return picked

    assert roots(3) == roots(3)
    assert set(roots(3)) <= set(ROOTS)


def test_checker_built_from_config(tmp_path: Path):
    d = tmp_path / "dict.txt"
    d.write_text("worms\n", encoding="utf-8")
    game = GameController(
        GameConfig(checker="wordlist", checker_options={"path": d}),
        source=WordSource(["silkworm"]),
    )
    assert game.submit("worms").accepted
    assert game.submit("silk").rejection.reason is RejectionReason.NOT_RECOGNIZED


def test_missing_wordlist_fails_at_startup(tmp_path: Path):
    with pytest.raises(WordListError):
        GameController(
            GameConfig(wordlist=tmp_path / "missing.txt"),
            checker=create_checker("wordlist", words=DICTIONARY),
        )


@pytest.mark.parametrize("kwargs", [{"score_mode": "double"}, {"min_length": 0}])
def test_bad_config_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_config_as_dict_is_plain():
    d = GameConfig(checker="wordlist", checker_options={"path": Path("x.txt")}).as_dict()
    assert d["checker_options"] == {"path": "x.txt"}
    assert d["score_mode"] == "raw"
    assert d["min_length"] == 4


def test_unsupported_language_fails_before_play():
    with pytest.raises(ValueError):
        GameController(
            GameConfig(language="xx-not-a-language"),
            source=WordSource(["silkworm"]),
            checker=create_checker("wordfreq"),
        )


def test_language_checked_once_game_is_built():
    game = GameController(
        GameConfig(language="en"),
        source=WordSource(["silkworm"]),
        checker=create_checker("wordfreq"),
    )
    assert game.submit("worms").accepted
