"""Centralizovaná inicializácia logovania pre scrabrules.

- Konfiguruje Rich konzolový handler a rotujúci súborový handler.
- Zabráni duplicitným handlerom pri opakovaných volaniach.
- Poskytuje `GAME_ID_VAR` pre propagáciu id hry cez ContextVar.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

# Id hry, ku ktorej patrí práve spracovaný ťah
GAME_ID_VAR: ContextVar[str] = ContextVar("game_id", default="-")


class _GameIdFilter(logging.Filter):
    """Filter doplní `game_id` do každého záznamu z ContextVar."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.game_id = GAME_ID_VAR.get()
        return True


def default_log_path() -> str:
    """Určí predvolenú cestu k log súboru.

    Predvolene koreň repozitára (`scrabrules.log`); možno prepísať premennou
    prostredia `SCRABRULES_LOG_PATH`.
    """

    env = os.getenv("SCRABRULES_LOG_PATH")
    if env:
        return env
    root_dir = Path(__file__).resolve().parents[1]
    return str(root_dir / "scrabrules.log")


def configure_logging(*, log_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Inicializuje logging iba raz a vráti projektový logger.

    - Rich na konzolu (prehľadné tracebacky)
    - Rotujúci súborový handler (≈1 MB, 5 záloh)
    - Formát zahŕňa `game_id` z `GAME_ID_VAR`
    """

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("scrabrules")

    root.setLevel(logging.DEBUG)
    game_filter = _GameIdFilter()

    # Konzola
    ch = RichHandler(rich_tracebacks=True, show_path=False)
    ch.setLevel(level)
    ch.addFilter(game_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    # Súbor s rotáciou
    path = log_path or default_log_path()
    try:
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError:
        # Bez súboru pokračuj aspoň s konzolou
        logging.getLogger("scrabrules").warning("Log súbor %s nie je zapisovateľný", path)
    else:
        fh.setLevel(logging.DEBUG)
        fh.addFilter(game_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [game=%(game_id)s] %(message)s"
            )
        )
        root.addHandler(fh)

    return logging.getLogger("scrabrules")
