"""Fasáda pre volajúceho (REST/CLI): ťah z textu -> explicitný výsledok.

Nižšie vrstvy vyhadzujú typované výnimky; `submit_move` ich zachytí a vráti
`MoveOutcome`, takže volajúci musí chybovú vetvu ošetriť explicitne.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..config import effective_strict_rack
from ..logging_setup import GAME_ID_VAR
from .board import Board
from .command import format_play_command, parse_play_command
from .errors import CommandParseError, MoveError, MoveValidationError
from .judge import OfflineJudge
from .play import play_move
from .rack import play_command_has_letters_from_rack
from .rules import BINGO_TEXT
from .types import Letter, PlayResult

log = logging.getLogger("scrabrules.game")


@dataclass
class MoveOutcome:
    """Výsledok odovzdania ťahu.

    - result: `PlayResult` pri úspechu, inak None
    - error: `CommandParseError` alebo `MoveValidationError` pri neúspechu
    """

    result: PlayResult | None = None
    error: MoveError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @property
    def reason(self) -> str | None:
        """Stručný kód dôvodu neplatnosti (alebo None pri úspechu)."""
        return self.error.reason if self.error is not None else None

    @property
    def total(self) -> int:
        return self.result.total if self.result is not None else 0


def submit_move(
    command_text: str,
    board: Board,
    *,
    rack: Mapping[Letter, int] | None = None,
    judge: OfflineJudge | None = None,
    strict_rack: bool | None = None,
    game_id: str | None = None,
) -> MoveOutcome:
    """Rozparsuje, overí a zahrá ťah; nikdy nevyhadzuje pre porušenie pravidiel.

    Kroky:
    1) parsovanie príkazu (`CommandParseError`)
    2) voliteľne kontrola racku (`rack_missing_tiles`)
    3) aplikácia na kópiu dosky a bodovanie (`MoveValidationError`)
    4) voliteľne slovníková kontrola všetkých vzniknutých slov
    """
    token = GAME_ID_VAR.set(game_id) if game_id else None
    try:
        return _submit(command_text, board, rack, judge, strict_rack)
    finally:
        if token is not None:
            GAME_ID_VAR.reset(token)


def _submit(
    command_text: str,
    board: Board,
    rack: Mapping[Letter, int] | None,
    judge: OfflineJudge | None,
    strict_rack: bool | None,
) -> MoveOutcome:
    try:
        command = parse_play_command(command_text)
    except CommandParseError as err:
        log.info("Neplatný príkaz %r: %s", command_text, err.reason)
        return MoveOutcome(error=err)

    if rack is not None:
        strict = effective_strict_rack(strict_rack)
        if not play_command_has_letters_from_rack(command, rack, board, strict=strict):
            log.info("Ťah %s: písmená nie sú na racku", format_play_command(command))
            return MoveOutcome(
                error=MoveValidationError("rack_missing_tiles", "Písmená ťahu nie sú na racku")
            )

    try:
        result = play_move(command, board)
    except MoveValidationError as err:
        log.info("Ťah %s zamietnutý: %s", format_play_command(command), err.reason)
        return MoveOutcome(error=err)

    if judge is not None:
        texts = [w.text for w in result.words if w.text != BINGO_TEXT]
        bad = judge.invalid_words(texts)
        if bad:
            log.info("Ťah %s: slová mimo wordlistu %s", format_play_command(command), bad)
            return MoveOutcome(
                error=MoveValidationError(f"word_not_in_dict:{bad[0]}", f"Slovo {bad[0]} nie je v slovníku")
            )

    log.info("Ťah %s prijatý za %d bodov", format_play_command(command), result.total)
    return MoveOutcome(result=result)
