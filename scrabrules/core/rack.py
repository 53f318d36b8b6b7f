"""Pomocné funkcie pre kontrolu písmen ťahu voči racku hráča.

Funkcie v tomto module sú čisté (bez vedľajších účinkov), aby sa dali
jednoducho testovať v unit testoch bez UI. Rack sa reprezentuje ako počty
kusov pre každé `Letter`, blank (`Letter.BLANK`) je samostatný žolík.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from .board import Board
from .types import Letter, MoveCommand


def rack_from_letters(letters: Iterable[str]) -> Counter[Letter]:
    """Zostaví rack z reťazca/zoznamu písmen; `?` znamená blank.

    Príklad: `rack_from_letters("AEIRST?")`.
    """
    return Counter(Letter.from_char(ch) for ch in letters if not ch.isspace())


def new_letters(command: MoveCommand, board: Board | None = None) -> list[str]:
    """Písmená príkazu, ktoré sa reálne kladú (pole ešte nie je odohrané).

    Bez dosky sa považujú za nové všetky písmená príkazu.
    """
    if board is None:
        return list(command.letters)
    out: list[str] = []
    for (x, y), ch in zip(command.coords(), command.letters):
        if not board.inside(x, y) or not board.square(x, y).played:
            out.append(ch)
    return out


def _rack_key(ch: str) -> Letter:
    # malé písmeno = blank, odpočítava sa z počtu blankov
    return Letter.BLANK if ch.islower() else Letter.from_char(ch)


def play_command_has_letters_from_rack(
    command: MoveCommand,
    rack: Mapping[Letter, int],
    board: Board | None = None,
    *,
    strict: bool = False,
) -> bool:
    """Či je ťah splniteľný z racku.

    Princípy:
    - Voľný režim (predvolený): stačí, aby aspoň jedno nové písmeno bolo
      na racku (veľké písmeno voči svojmu počtu, malé voči počtu blankov).
    - Striktný režim: každé nové písmeno spotrebuje jeden kus; malé písmená
      spotrebúvajú blanky.

    Rack sa nemodifikuje.
    """
    placed = new_letters(command, board)
    if not strict:
        return any(rack.get(_rack_key(ch), 0) > 0 for ch in placed)

    needed = Counter(_rack_key(ch) for ch in placed)
    return all(rack.get(letter, 0) >= count for letter, count in needed.items())
