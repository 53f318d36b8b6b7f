"""Serializácia dosky: textová mriežka (fixtures/nástroje) a JSON stav.

Pozn.: Modul je bez UI/sieťových závislostí, vhodný pre unit testy a mypy.

Textová mriežka:

       A B C D E F G H I J K L M N O
      +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
     1| | | | | | | | | | | | | | | |0
      +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
     ...
       0 1 2 3 4 5 6 7 8 9 0 1 2 3 4

- veľké písmeno = odohraná dlaždica, malé písmeno = odohraný blank
- medzera = prázdne pole
"""
from __future__ import annotations

import re
from typing import Any, TypedDict

from .board import BOARD_SIZE, Board
from .types import Letter

_ROW_RX = re.compile(r"^\s*(\d{1,2})\|(.*)$")
_COLUMNS = "ABCDEFGHIJKLMNO"
_SEPARATOR = "  +" + "-+" * BOARD_SIZE


def render_board(board: Board) -> str:
    """Vykreslí dosku do textovej mriežky s pravítkami riadkov a stĺpcov."""
    lines = ["   " + " ".join(_COLUMNS), _SEPARATOR]
    for y in range(BOARD_SIZE):
        cells = []
        for x in range(BOARD_SIZE):
            sq = board.square(x, y)
            cells.append(sq.char if sq.played else " ")
        lines.append(f"{y + 1:>2}|" + "|".join(cells) + f"|{y}")
        lines.append(_SEPARATOR)
    lines.append("   " + " ".join(str(x % 10) for x in range(BOARD_SIZE)))
    return "\n".join(lines)


def parse_board(text: str, premiums_path: str | None = None) -> Board:
    """Z textovej mriežky zostaví `Board`.

    Prémie sa načítajú zo `premiums_path` (predvolene štandardné rozloženie),
    písmená v mriežke sú odohrané. Pri neplatnom formáte vyhodí `ValueError`.
    """
    board = Board(premiums_path) if premiums_path else Board.standard()
    seen: set[int] = set()
    for line in text.splitlines():
        m = _ROW_RX.match(line)
        if not m:
            continue
        y = int(m.group(1)) - 1
        if not (0 <= y < BOARD_SIZE) or y in seen:
            raise ValueError(f"Neplatné číslo riadku v mriežke: {m.group(1)}")
        cells = m.group(2).split("|")
        if len(cells) < BOARD_SIZE + 1:
            raise ValueError(f"Riadok {y + 1} nemá {BOARD_SIZE} buniek")
        for x, cell in enumerate(cells[:BOARD_SIZE]):
            ch = cell.strip()
            if not ch:
                continue
            if len(ch) != 1 or not ("A" <= ch.upper() <= "Z"):
                raise ValueError(f"Neplatný znak v mriežke: {cell!r}")
            sq = board.square(x, y)
            sq.letter = Letter.from_char(ch)
            sq.blank_letter = ch if ch.islower() else None
            sq.played = True
        seen.add(y)
    if len(seen) != BOARD_SIZE:
        raise ValueError(f"Mriežka musí mať {BOARD_SIZE} riadkov, našlo sa {len(seen)}")
    return board


class _Pos(TypedDict):
    """Pomocná štruktúra pre pozície buniek (x, y)."""
    x: int
    y: int


class BoardState(TypedDict):
    """JSON-serializovateľný stav dosky pre perzistenciu (schema v1).

    - schema_version: "1"
    - grid: 15× reťazec dĺžky 15 ('.' alebo 'A'..'Z')
    - blanks: pozície, kde leží blank (v `grid` už je mapované písmeno)
    """

    schema_version: str
    grid: list[str]
    blanks: list[_Pos]


def build_board_state_dict(board: Board) -> BoardState:
    """Vytvorí JSON-serializovateľný stav dosky (iba odohrané polia)."""
    grid: list[str] = []
    blanks: list[_Pos] = []
    for y in range(BOARD_SIZE):
        row_chars: list[str] = []
        for x in range(BOARD_SIZE):
            sq = board.square(x, y)
            if sq.played:
                row_chars.append(sq.letter.value)
                if sq.is_blank:
                    blanks.append({"x": x, "y": y})
            else:
                row_chars.append(".")
        grid.append("".join(row_chars))
    return BoardState(schema_version="1", grid=grid, blanks=blanks)


def parse_board_state_dict(data: dict[str, Any]) -> BoardState:
    """Overí a normalizuje vstupný slovník podľa schema v1.

    Vyvolá `AssertionError` pri neplatnom formáte (vhodné pre testy a guardy).
    """
    assert data.get("schema_version") == "1", "Nepodporovaná schema_version"

    grid = data.get("grid")
    assert isinstance(grid, list) and len(grid) == BOARD_SIZE
    for row in grid:
        assert isinstance(row, str) and len(row) == BOARD_SIZE
        assert all(ch == "." or "A" <= ch <= "Z" for ch in row)

    arr = data.get("blanks", [])
    assert isinstance(arr, list)
    blanks: list[_Pos] = []
    for it in arr:
        assert isinstance(it, dict)
        x, y = it.get("x"), it.get("y")
        assert isinstance(x, int) and isinstance(y, int)
        assert 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE
        assert grid[y][x] != ".", "Blank na prázdnom poli"
        blanks.append({"x": x, "y": y})

    return BoardState(schema_version="1", grid=grid, blanks=blanks)


def restore_board_from_state(state: BoardState, premiums_path: str | None = None) -> Board:
    """Zo `BoardState` v1 vybuduje `Board` s písmenami a príznakmi.

    Prémie sa načítajú zo statickej mapy; na odohraných poliach sa
    pri bodovaní aj tak ignorujú.
    """
    board = Board(premiums_path) if premiums_path else Board.standard()
    for y, row in enumerate(state["grid"]):
        for x, ch in enumerate(row):
            if ch == ".":
                continue
            sq = board.square(x, y)
            sq.letter = Letter.from_char(ch)
            sq.played = True
    for pos in state.get("blanks", []):
        sq = board.square(pos["x"], pos["y"])
        if sq.played:
            sq.blank_letter = sq.letter.value.lower()
    return board
