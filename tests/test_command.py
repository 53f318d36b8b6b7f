from __future__ import annotations

import pytest

from scrabrules.core.command import format_play_command, parse_play_command
from scrabrules.core.errors import CommandParseError


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("A H8 V", "word_too_short"),
        ("APPLE", "malformed"),
        ("APPLE H", "malformed"),
        ("APPLE G8", "malformed"),
        ("APPLE A2 A", "direction_invalid"),
        ("APPLE W2 H", "column_invalid"),
        ("APPLE f20 H", "row_invalid"),
        ("APPLE a0 H", "row_invalid"),
        ("AP1LE a1 H", "malformed"),
        ("APPLE a1 H extra", "malformed"),
        ("", "malformed"),
    ],
)
def test_invalid_commands(text: str, reason: str) -> None:
    with pytest.raises(CommandParseError) as exc:
        parse_play_command(text)
    assert exc.value.reason == reason


def test_apple_a1_v() -> None:
    move = parse_play_command("APPLE a1 V")
    assert move.x == 0
    assert move.y == 0
    assert move.is_vertical is True
    assert list(move.letters) == ["A", "P", "P", "L", "E"]


def test_ingrain_o15_h() -> None:
    move = parse_play_command("INGRAIN O15 h")
    assert (move.x, move.y) == (14, 14)
    assert move.is_vertical is False
    assert move.word == "INGRAIN"


def test_casing_marks_blanks_and_is_preserved() -> None:
    move = parse_play_command("CAt h8 h")
    assert move.letters == ("C", "A", "t")


def test_coords_follow_direction() -> None:
    assert parse_play_command("CAT b2 v").coords() == [(1, 1), (1, 2), (1, 3)]
    assert parse_play_command("CAT b2 h").coords() == [(1, 1), (2, 1), (3, 1)]


def test_format_round_trip() -> None:
    move = parse_play_command("fourth c7 h")
    assert format_play_command(move) == "fourth C7 H"
    assert parse_play_command(format_play_command(move)) == move
