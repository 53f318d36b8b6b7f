from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path

from .assets import get_premiums_path
from .types import Letter, MultiplierType, Premium

BOARD_SIZE = 15
CENTER = (7, 7)  # H8 (0-index, x/y)

_PREMIUM_TAGS = {p.name: p for p in Premium}


@dataclass
class Square:
    """Jedno pole dosky.

    Nasobitel sa berie do uvahy iba kym `played` je False; po prvom
    polozeni sa povazuje za spotrebovany.
    """
    letter: Letter = Letter.UNSET
    played: bool = False
    blank_letter: str | None = None  # povodne male pismeno, ak ide o blank
    multiplier: int = 1
    multiplier_type: MultiplierType = MultiplierType.NONE

    @property
    def has_letter(self) -> bool:
        return self.letter is not Letter.UNSET

    @property
    def is_blank(self) -> bool:
        return self.blank_letter is not None

    @property
    def char(self) -> str:
        """Znak na zobrazenie: pismeno, pri blanku male pismeno, inak ''."""
        if self.blank_letter:
            return self.blank_letter
        return self.letter.value


class Board:
    """Model scrabble dosky 15x15 s nasobitelmi (squares[y][x])."""

    def __init__(self, premiums_path: str | None = None) -> None:
        self.squares: list[list[Square]] = [
            [Square() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        if premiums_path:
            self._load_premiums(premiums_path)

    @classmethod
    def standard(cls) -> Board:
        """Doska so standardnym rozlozenim premii z assets/premiums.json."""
        return cls(get_premiums_path())

    @classmethod
    def blank(cls) -> Board:
        """Doska bez akychkolvek nasobitelov."""
        return cls(None)

    def _load_premiums(self, path: str) -> None:
        p = Path(path)
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                premium = _PREMIUM_TAGS.get(data[y][x])
                if premium is None:
                    continue
                sq = self.squares[y][x]
                sq.multiplier = premium.multiplier
                sq.multiplier_type = premium.multiplier_type

    def inside(self, x: int, y: int) -> bool:
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def square(self, x: int, y: int) -> Square:
        return self.squares[y][x]

    def is_empty(self) -> bool:
        """True, ak na doske este nie je ziadne odohrane pole (prvy tah)."""
        return not any(sq.played for row in self.squares for sq in row)

    def copy(self) -> Board:
        """Nezavisla pracovna kopia dosky (ziadne zdielane Square objekty)."""
        clone = Board.__new__(Board)
        clone.squares = copy.deepcopy(self.squares)
        return clone

    def premium_at(self, x: int, y: int) -> Premium | None:
        """Spatne zisti premiovy tag pola (pre serializaciu a vypisy)."""
        sq = self.squares[y][x]
        if sq.multiplier_type is MultiplierType.NONE:
            return None
        for premium in Premium:
            if (premium.multiplier, premium.multiplier_type) == (sq.multiplier, sq.multiplier_type):
                return premium
        return None
