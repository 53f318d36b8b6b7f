"""Aplikácia ťahu na dosku: overenie pravidiel a výpočet skóre.

Pracuje vždy nad vlastnou kópiou dosky. Doska volajúceho sa nemení; nová
doska sa vráti v `PlayResult` iba pri úspechu (compute-then-commit).
"""
from __future__ import annotations

import logging

from .board import Board
from .errors import MoveValidationError
from .rules import (
    BINGO_BONUS,
    BINGO_TEXT,
    MAX_RACK_TILES,
    command_fits_on_board,
    crossing_run,
    validate_placement,
)
from .scoring import apply_word_multipliers, points_from_square, score_word
from .types import FormedWord, Letter, MoveCommand, PlayResult

log = logging.getLogger("scrabrules.play")


def play_move(command: MoveCommand, board: Board) -> PlayResult:
    """Zahrá `command` na kópii `board` a vráti novú dosku so zoznamom slov.

    Poradie slov: hlavné slovo, krížové slová v poradí prechodu, prípadne BINGO.
    Pri porušení pravidiel vyhodí `MoveValidationError`.
    """
    if not command_fits_on_board(board, command):
        raise MoveValidationError("out_of_bounds", f"Slovo {command.word} presahuje dosku")

    is_first_word = board.is_empty()
    working = board.copy()
    connects_to_played_square = False
    newly_placed = 0
    points = 0
    word_multipliers: list[int] = []
    crossing_words: list[FormedWord] = []

    for (x, y), ch in zip(command.coords(), command.letters):
        sq = working.square(x, y)

        if sq.played:
            if sq.letter is not Letter.from_char(ch):
                raise MoveValidationError(
                    "conflicting_letter",
                    f"Pole {x},{y} už obsahuje {sq.letter.value}, nie {ch.upper()}",
                )
            connects_to_played_square = True
            pts, _ = points_from_square(sq)
            points += pts
            continue

        sq.letter = Letter.from_char(ch)
        sq.blank_letter = ch if ch.islower() else None
        pts, mult = points_from_square(sq)
        points += pts
        if mult is not None:
            word_multipliers.append(mult)
        newly_placed += 1

        # kolme slovo cez prave polozene pismeno (jednopismenne sa nepocita)
        run = crossing_run(working, x, y, command.is_vertical)
        if len(run) >= 2:
            crossing_words.append(
                FormedWord("".join(s.char for s in run), score_word(run))
            )
            connects_to_played_square = True

        sq.played = True

    validate_placement(
        working,
        is_first_word=is_first_word,
        connects_to_played_square=connects_to_played_square,
        newly_placed=newly_placed,
    )

    words = [FormedWord(command.word, apply_word_multipliers(points, word_multipliers))]
    words.extend(crossing_words)
    if newly_placed == MAX_RACK_TILES:
        words.append(FormedWord(BINGO_TEXT, BINGO_BONUS))

    log.debug(
        "Tah %s: nove dlazdice=%d, slova=%s",
        command.word,
        newly_placed,
        [(w.text, w.points) for w in words],
    )
    return PlayResult(board=working, words=words)
