from __future__ import annotations

from pathlib import Path

from scrabrules.__main__ import main
from scrabrules.core.board import Board
from scrabrules.core.command import parse_play_command
from scrabrules.core.play import play_move
from scrabrules.core.state import render_board


def test_cli_plays_example_game(capsys) -> None:
    rc = main([
        "FIRST h8 h", "SECOND k8 v", "THIRD g13 h", "FOURTH c7 h",
        "FIFTH L5 v", "SIXTH k6 h", "FOURTHESTF c7 h",
    ])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Spolu: 144" in out
    assert "FOURTHESTF c7 h: STSECOND 11" in out
    assert " 8| | | | | | | |F|I|R|S|T| | | |7" in out


def test_cli_reads_board_file(tmp_path: Path, capsys) -> None:
    start = play_move(parse_play_command("FIRST h8 h"), Board.standard()).board
    board_file = tmp_path / "board.txt"
    board_file.write_text(render_board(start), encoding="utf-8")
    rc = main(["--board", str(board_file), "SECOND k8 v"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "SECOND k8 v: SECOND 18" in out


def test_cli_reports_rejection(capsys) -> None:
    rc = main(["FIRST a1 h"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "first_move_must_cover_center" in out


def test_cli_wordlist(tmp_path: Path, capsys) -> None:
    wl = tmp_path / "words.txt"
    wl.write_text("FIRST\n", encoding="utf-8")
    rc = main(["--wordlist", str(wl), "FIRST h8 h", "FOURTH c7 h"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "word_not_in_dict:FOURTH" in out
