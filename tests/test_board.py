from scrabrules.core.board import BOARD_SIZE, CENTER, Board
from scrabrules.core.types import Letter, MultiplierType, Premium


def test_premium_counts():
    b = Board.standard()
    counts = {"DL":0,"TL":0,"DW":0,"TW":0,"":0}
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            premium = b.premium_at(x, y)
            counts[premium.name if premium else ""] += 1
    assert counts["TW"] == 8
    assert counts["DW"] == 17
    assert counts["TL"] == 12
    assert counts["DL"] == 24
    assert counts[""] == 225 - (8+17+12+24)

def test_dw_spotchecks():
    b = Board.standard()
    # B2, C3, D4, E5, K11, L12, M13, N14 a stred
    checks = [(1,1),(2,2),(3,3),(4,4),(10,10),(11,11),(12,12),(13,13),
              (1,13),(2,12),(3,11),(4,10),(10,4),(11,3),(12,2),(13,1), CENTER]
    for x, y in checks:
        sq = b.square(x, y)
        assert sq.multiplier == 2
        assert sq.multiplier_type is MultiplierType.WORD

def test_letter_premium_maps_to_square_fields():
    b = Board.standard()
    # (5,5) je TL, (3,0) je DL
    assert (b.square(5, 5).multiplier, b.square(5, 5).multiplier_type) == (3, MultiplierType.LETTER)
    assert (b.square(3, 0).multiplier, b.square(3, 0).multiplier_type) == (2, MultiplierType.LETTER)
    assert b.premium_at(0, 0) is Premium.TW

def test_blank_board_has_no_multipliers():
    b = Board.blank()
    assert all(
        sq.multiplier_type is MultiplierType.NONE and sq.multiplier == 1
        for row in b.squares for sq in row
    )

def test_is_empty_tracks_played_flag():
    b = Board.standard()
    assert b.is_empty()
    # pismeno bez played sa neratá (rozpracovany tah)
    b.square(0, 0).letter = Letter.A
    assert b.is_empty()
    b.square(0, 0).played = True
    assert not b.is_empty()

def test_copy_is_independent():
    b = Board.standard()
    clone = b.copy()
    clone.square(7, 7).letter = Letter.Q
    clone.square(7, 7).played = True
    assert b.square(7, 7).letter is Letter.UNSET
    assert b.is_empty()
    assert clone.square(7, 7).multiplier == 2

def test_inside():
    b = Board.blank()
    assert b.inside(0, 0) and b.inside(14, 14)
    assert not b.inside(15, 0)
    assert not b.inside(0, -1)
