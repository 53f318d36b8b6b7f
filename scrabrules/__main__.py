"""Vstupný bod pre spustenie: `python -m scrabrules`.

Zahrá zadané príkazy postupne na doske (prázdnej alebo z textovej mriežky)
a vypíše vzniknuté slová, body a výslednú mriežku.

Príklad:
    python -m scrabrules "FIRST h8 h" "SECOND k8 v"
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .core.board import Board
from .core.game import submit_move
from .core.judge import OfflineJudge
from .core.rack import rack_from_letters
from .core.state import parse_board, render_board
from .logging_setup import configure_logging


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="scrabrules", description="Overenie a bodovanie ťahov")
    p.add_argument("commands", nargs="+", help="Príkazy ťahov, napr. 'APPLE a1 V'")
    p.add_argument("--board", type=Path, help="Súbor s textovou mriežkou dosky")
    p.add_argument("--rack", type=str, help="Písmená na racku ('?' = blank)")
    p.add_argument("--wordlist", type=Path, help="Wordlist pre offline rozhodcu (slovo na riadok)")
    p.add_argument("--strict-rack", action="store_true", help="Striktná kontrola racku po dlaždiciach")
    p.add_argument("--game-id", type=str, help="Id hry pre logy")
    p.add_argument("-v", "--verbose", action="store_true", help="Podrobné logy na konzolu")
    args = p.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    board = parse_board(args.board.read_text(encoding="utf-8")) if args.board else Board.standard()
    rack = rack_from_letters(args.rack) if args.rack else None
    judge = OfflineJudge.from_path(args.wordlist) if args.wordlist else None

    total = 0
    for text in args.commands:
        outcome = submit_move(
            text,
            board,
            rack=rack,
            judge=judge,
            strict_rack=args.strict_rack,
            game_id=args.game_id,
        )
        if not outcome.ok:
            print(f"{text}: zamietnuté ({outcome.reason}) - {outcome.error}")
            return 1
        assert outcome.result is not None
        for word in outcome.result.words:
            print(f"{text}: {word.text} {word.points}")
        total += outcome.total
        board = outcome.result.board

    print(f"Spolu: {total}")
    print(render_board(board))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
