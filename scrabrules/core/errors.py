"""Typované chyby ťahu.

Každá chyba nesie stabilný kód `reason` (snake_case) vhodný na zobrazenie
v UI a čitateľnú správu.
"""
from __future__ import annotations


class MoveError(ValueError):
    """Spoločný predok chýb pri spracovaní ťahu."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or reason)


class CommandParseError(MoveError):
    """Neplatný textový príkaz ťahu (zlá dĺžka, súradnica, smer, tvar)."""


class MoveValidationError(MoveError):
    """Porušenie pravidiel ťahu; doska volajúceho ostáva nezmenená."""
