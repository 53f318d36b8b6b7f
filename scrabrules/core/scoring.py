from __future__ import annotations

from collections.abc import Iterable
from math import prod

from .board import Square
from .tiles import letter_value
from .types import MultiplierType


def points_from_square(square: Square) -> tuple[int, int | None]:
    """Body za pismeno na poli a pripadny slovny nasobitel.

    Vracia `(body, nasobitel_slova | None)`:
    - uz odohrane pole: iba zakladna hodnota, nasobitel sa neuvazuje
    - pismenovy nasobitel (DL/TL): uplatni sa hned a je spotrebovany
    - slovny nasobitel (DW/TW): body bez nasobenia, nasobitel vrati volajucemu
    Blank ma vzdy hodnotu 0, nie hodnotu zastupeneho pismena.
    """
    base = letter_value(square.letter, is_blank=square.is_blank)
    if square.played:
        return base, None
    if square.multiplier_type is MultiplierType.LETTER:
        return base * square.multiplier, None
    if square.multiplier_type is MultiplierType.WORD:
        return base, square.multiplier
    return base, None


def apply_word_multipliers(points: int, multipliers: Iterable[int]) -> int:
    """Vynasobi sucet slova vsetkymi nazbieranymi slovnymi nasobitelmi."""
    return points * prod(multipliers)


def score_word(squares: Iterable[Square]) -> int:
    """Skore jedneho slova s vlastnym (cerstvym) zoznamom slovnych nasobitelov."""
    points = 0
    multipliers: list[int] = []
    for sq in squares:
        pts, mult = points_from_square(sq)
        points += pts
        if mult is not None:
            multipliers.append(mult)
    return apply_word_multipliers(points, multipliers)
