"""Konfigurácia a flagy pre scrabrules.

Pravidlá:
- SCRABRULES_STRICT_RACK='1' -> vždy striktná kontrola racku (override volajúceho).
- SCRABRULES_STRICT_RACK='0' alebo chýba -> riadi to volajúci (predvolene voľná).
- SCRABRULES_LOG_PATH -> cesta k log súboru (viď `logging_setup`).
"""
from __future__ import annotations

import os
from contextlib import suppress

from dotenv import load_dotenv

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenne
if os.getenv("PYTEST_CURRENT_TEST") is None:
    with suppress(OSError):
        load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Bezpečné parsovanie boolean reťazcov; None ak neznáme.

    Komentár (SK): Funkcia akceptuje viacero zápisov pravdy/nepravdy a vráti
    None, ak hodnota nie je rozpoznaná.
    """
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def effective_strict_rack(requested: bool | None) -> bool:
    """Vráti výsledný režim kontroly racku podľa .env a požiadavky volajúceho.

    - .env == True  -> vždy True
    - .env == False -> podľa volajúceho
    - .env == None  -> podľa volajúceho
    """
    env_val = _parse_bool(os.getenv("SCRABRULES_STRICT_RACK"))
    if env_val is True:
        return True
    return bool(requested)
