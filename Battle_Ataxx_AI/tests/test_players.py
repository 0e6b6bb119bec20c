"""Player variants chosen by configuration, and settings loading."""

import time

import pytest

from Battle_Ataxx_AI import main
from Battle_Ataxx_AI.AIPlayer import AIPlayer
from Battle_Ataxx_AI.Board import Board
from Battle_Ataxx_AI.Player import HumanPlayer, make_player
from Battle_Ataxx_AI.engine.pieces import RED, BLUE
from Battle_Ataxx_AI.utils.logger import move_reporter
from Battle_Ataxx_AI.Move import Move


def test_make_player_kinds():
    ai = make_player("ai", RED, depth=2)
    assert isinstance(ai, AIPlayer)
    assert ai.depth == 2
    assert isinstance(make_player("human", BLUE), HumanPlayer)
    with pytest.raises(ValueError):
        make_player("robot", RED)


def test_human_player_reads_line():
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return "  a7-b6\n"

    player = HumanPlayer(RED, read_line=read_line)
    assert player.next_move(Board(), deadline=time.time() + 5) == "a7-b6"
    assert prompts and prompts[0].startswith("Red move")


def test_human_player_late_answer_times_out():
    player = HumanPlayer(RED, read_line=lambda prompt: "a7-b6")
    with pytest.raises(TimeoutError):
        player.next_move(Board(), deadline=time.time() - 1)


def test_ai_player_reports_its_move():
    logs = []
    player = AIPlayer(RED, depth=1, reporter=move_reporter(logs.append))
    mv = player.next_move(Board())
    assert logs == [f"Red moves {mv}."]
    assert player.stats and player.stats[0]["color"] is RED


def test_reporter_announces_pass():
    logs = []
    move_reporter(logs.append)(Move.pass_move(), BLUE)
    assert logs == ["Blue passes."]


def test_default_settings_load():
    settings = main.load_settings("config/settings.yaml")
    assert settings["search_depth"] == 4
    assert settings["mode"] in main.MODES
    assert settings["blocks"] == []


def test_cli_overrides(tmp_path, monkeypatch, capsys):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("search_depth: 3\nmove_timeout_seconds: 30\nmode: human-vs-human\n", encoding="utf-8")

    created = {}

    class FakeGame:
        def __init__(self, **kwargs):
            created.update(kwargs)

        def play(self):
            return RED

    monkeypatch.setattr(main, "Ataxxgame", FakeGame)
    main.main(["--settings", str(cfg), "--depth", "1", "--mode", "ai-vs-ai", "--block", "c3"])

    assert isinstance(created["red_player"], AIPlayer)
    assert created["red_player"].depth == 1
    assert created["move_timeout"] == 30
    assert created["blocks"] == ["c3"]
    assert capsys.readouterr().out.strip() == "Red wins"
