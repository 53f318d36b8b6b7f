from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

"""Offline rozhodca nad wordlistom (voliteľný spolupracovník).

Jadro ťahu legalitu slov nerieši; fasáda `submit_move` sa môže spýtať
rozhodcu, ak ho volajúci poskytne.

Poznámky:
- Wordlist sa načítava do pamäte ako `set[str]` v UPPERCASE (A–Z).
- Overovanie je case-insensitive; blanky (malé písmená) sa porovnávajú
  ako písmeno, ktoré zastupujú.
"""
log = logging.getLogger("scrabrules.judge")


class OfflineJudge:
    """Jednoduchý offline rozhodca nad wordlistom.

    Atribúty:
        words: množina povolených slov v UPPERCASE.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self.words: set[str] = {w for w in (self._normalize(x) for x in words) if w}

    @staticmethod
    def _normalize(word: str) -> str:
        """Normalizuje slovo na UPPERCASE a ponechá iba A–Z."""
        return "".join(ch for ch in word.upper() if "A" <= ch <= "Z")

    @classmethod
    def from_path(cls, path: str | Path) -> OfflineJudge:
        """Načíta wordlist zo súboru a vytvorí inštanciu.

        Každý riadok = jedno slovo; prázdne riadky a komentáre (`#`) sa ignorujú.
        """
        words: list[str] = []
        with Path(path).open(encoding="utf-8", errors="ignore") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                words.append(line)
        judge = cls(words)
        log.info("Wordlist %s načítaný: %d slov", path, judge.count())
        return judge

    def contains(self, word: str) -> bool:
        """Vracia True, ak je `word` vo wordliste (case-insensitive)."""
        w = self._normalize(word)
        if not w:
            return False
        return w in self.words

    def invalid_words(self, words: Iterable[str]) -> list[str]:
        """Zoznam slov, ktoré vo wordliste nie sú (v poradí vstupu)."""
        return [w for w in words if not self.contains(w)]

    def count(self) -> int:
        """Počet slov v aktuálne načítanom wordliste."""
        return len(self.words)
