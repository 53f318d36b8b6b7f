from __future__ import annotations

from .board import CENTER, Board, Square
from .errors import MoveValidationError
from .types import MoveCommand

MAX_RACK_TILES = 7
BINGO_TEXT = "*BINGO*"
BINGO_BONUS = 50


def command_fits_on_board(board: Board, command: MoveCommand) -> bool:
    """Ci sa cele slovo zmesti na dosku od startovej suradnice."""
    return all(board.inside(x, y) for x, y in command.coords())


def first_move_must_cover_center(board: Board) -> bool:
    """Ci je po prvom tahu obsadeny stred (H8)."""
    return board.square(*CENTER).played


def crossing_run(board: Board, x: int, y: int, is_vertical: bool) -> list[Square]:
    """Maximalny suvisly usek pismen kolmy na smer tahu, ktory obsahuje (x, y).

    `is_vertical` je smer hlavneho slova; skenuje sa v kolmom smere.
    """
    dx, dy = (1, 0) if is_vertical else (0, 1)
    # posun dolava/nahor kym su na poliach pismena
    sx, sy = x, y
    while board.inside(sx - dx, sy - dy) and board.square(sx - dx, sy - dy).has_letter:
        sx -= dx
        sy -= dy
    run: list[Square] = []
    # dopln doprava/nadol
    while board.inside(sx, sy) and board.square(sx, sy).has_letter:
        run.append(board.square(sx, sy))
        sx += dx
        sy += dy
    return run


def validate_placement(
    working: Board,
    *,
    is_first_word: bool,
    connects_to_played_square: bool,
    newly_placed: int,
) -> None:
    """Overi pravidla umiestnenia v poradi priority; pri poruseni vyhodi chybu."""
    if is_first_word and not first_move_must_cover_center(working):
        raise MoveValidationError(
            "first_move_must_cover_center", "Prvé slovo musí prechádzať stredom dosky (H8)"
        )
    if not is_first_word and not connects_to_played_square:
        raise MoveValidationError(
            "not_connected", "Slovo musí nadväzovať na slová na doske"
        )
    if newly_placed > MAX_RACK_TILES:
        raise MoveValidationError(
            "too_many_tiles",
            f"Ťah kladie {newly_placed} nových dlaždíc, maximum je {MAX_RACK_TILES}",
        )
