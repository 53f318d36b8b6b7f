"""Parser textového príkazu ťahu, napr. `"APPLE a1 V"`.

Formát: `<SLOVO> <STĹPEC><RIADOK> <SMER>`
- SLOVO: aspoň 2 písmená; veľké = dlaždica, malé = blank za dané písmeno
- STĹPEC: A–O (case-insensitive) -> x 0..14
- RIADOK: 1–15 -> y 0..14
- SMER: H/h (vodorovne) alebo V/v (zvisle)
"""
from __future__ import annotations

import re

from .board import BOARD_SIZE
from .errors import CommandParseError
from .types import MoveCommand

_WORD_RX = re.compile(r"^[A-Za-z]+$")
_COORD_RX = re.compile(r"^([A-Za-z])(\d{1,2})$")
_COLUMNS = "ABCDEFGHIJKLMNO"


def parse_play_command(text: str) -> MoveCommand:
    """Rozparsuje príkaz na `MoveCommand`; pri chybe vyhodí `CommandParseError`."""
    tokens = text.split()
    if len(tokens) != 3:
        raise CommandParseError(
            "malformed", f"Očakávaný tvar '<SLOVO> <SÚRADNICA> <SMER>', prišlo: {text!r}"
        )
    word, coord, direction = tokens

    if not _WORD_RX.match(word):
        raise CommandParseError("malformed", f"Slovo smie obsahovať iba písmená A–Z: {word!r}")
    if len(word) < 2:
        raise CommandParseError("word_too_short", "Slovo musí mať aspoň 2 písmená")

    m = _COORD_RX.match(coord)
    if not m:
        raise CommandParseError("malformed", f"Neplatná súradnica: {coord!r}")
    col_ch, row_str = m.groups()
    x = _COLUMNS.find(col_ch.upper())
    if x < 0:
        raise CommandParseError("column_invalid", f"Stĺpec musí byť A–O, prišlo {col_ch!r}")
    row = int(row_str)
    if not (1 <= row <= BOARD_SIZE):
        raise CommandParseError("row_invalid", f"Riadok musí byť 1–15, prišlo {row}")

    if direction not in ("H", "h", "V", "v"):
        raise CommandParseError("direction_invalid", f"Smer musí byť H alebo V, prišlo {direction!r}")

    return MoveCommand(
        x=x,
        y=row - 1,
        is_vertical=direction.upper() == "V",
        letters=tuple(word),
    )


def format_play_command(command: MoveCommand) -> str:
    """Opačný smer k `parse_play_command` (kanonický zápis pre logy a výpisy)."""
    direction = "V" if command.is_vertical else "H"
    return f"{command.word} {_COLUMNS[command.x]}{command.y + 1} {direction}"
