from __future__ import annotations

from pathlib import Path

from scrabrules.core.judge import OfflineJudge


def test_from_path_skips_comments_and_blank_lines(tmp_path: Path) -> None:
    wl = tmp_path / "words.txt"
    wl.write_text("# komentar\nfirst\n\nSECOND\n  third  \n", encoding="utf-8")
    judge = OfflineJudge.from_path(wl)
    assert judge.count() == 3
    assert judge.contains("FIRST")
    assert judge.contains("second")
    assert judge.contains("Third")


def test_contains_treats_blank_as_its_letter() -> None:
    judge = OfflineJudge(["CAT"])
    assert judge.contains("CAt")
    assert not judge.contains("")
    assert not judge.contains("DOG")


def test_invalid_words_keeps_order() -> None:
    judge = OfflineJudge(["FIRST", "EI"])
    assert judge.invalid_words(["FIRST", "XQ", "EI", "ZZ"]) == ["XQ", "ZZ"]
