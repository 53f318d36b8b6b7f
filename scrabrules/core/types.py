from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board

# Pozn.: Vsetky komentare su v slovencine podla preferencii pouzivatela.

class Letter(Enum):
    """Pismeno dlazdice; BLANK je zolik, UNSET prazdne pole."""
    UNSET = ""
    BLANK = "?"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    @classmethod
    def from_char(cls, ch: str) -> Letter:
        """Prevedie znak na pismeno; male pismeno znamena blank za dane pismeno."""
        if ch == "?":
            return cls.BLANK
        if len(ch) != 1 or not ("A" <= ch.upper() <= "Z"):
            raise ValueError(f"Neplatne pismeno: {ch!r}")
        return cls(ch.upper())


class MultiplierType(Enum):
    """Na co sa vztahuje nasobitel pola."""
    NONE = auto()
    LETTER = auto()
    WORD = auto()


class Premium(Enum):
    """Premiove polia na doske (tagy v premiums.json)."""
    DL = auto()  # Double Letter
    TL = auto()  # Triple Letter
    DW = auto()  # Double Word
    TW = auto()  # Triple Word

    @property
    def multiplier(self) -> int:
        return 2 if self in (Premium.DL, Premium.DW) else 3

    @property
    def multiplier_type(self) -> MultiplierType:
        if self in (Premium.DL, Premium.TL):
            return MultiplierType.LETTER
        return MultiplierType.WORD


@dataclass(frozen=True)
class MoveCommand:
    """Rozparsovany prikaz tahu (zaciatok, smer, pismena v poradi)."""
    x: int  # stlpec 0..14
    y: int  # riadok 0..14
    is_vertical: bool
    letters: tuple[str, ...]  # male pismeno = blank

    @property
    def word(self) -> str:
        return "".join(self.letters)

    def coords(self) -> list[tuple[int, int]]:
        """Suradnice (x, y) vsetkych pismen prikazu v poradi."""
        dx, dy = (0, 1) if self.is_vertical else (1, 0)
        return [(self.x + i * dx, self.y + i * dy) for i in range(len(self.letters))]


@dataclass(frozen=True)
class FormedWord:
    """Jedno slovo vytvorene tahom a jeho body."""
    text: str
    points: int


@dataclass
class PlayResult:
    """Vysledok platneho tahu: nova doska a zoznam slov (index 0 = hlavne slovo)."""
    board: Board
    words: list[FormedWord]

    @property
    def total(self) -> int:
        return sum(w.points for w in self.words)
