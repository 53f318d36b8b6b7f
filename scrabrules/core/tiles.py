from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .types import Letter

# Bodove hodnoty anglickej sady; nemenna tabulka zdielana celym procesom.
LETTER_VALUES: Mapping[Letter, int] = MappingProxyType({
    Letter.UNSET: 0,
    Letter.BLANK: 0,
    **{Letter(c): 1 for c in "AEILNORSTU"},
    **{Letter(c): 2 for c in "DG"},
    **{Letter(c): 3 for c in "BCMP"},
    **{Letter(c): 4 for c in "FHVWY"},
    Letter.K: 5,
    **{Letter(c): 8 for c in "JX"},
    **{Letter(c): 10 for c in "QZ"},
})


def letter_value(letter: Letter, *, is_blank: bool = False) -> int:
    """Hodnota dlaždice; blank má vždy hodnotu BLANK (0), nie zastúpeného písmena."""

    if is_blank:
        return LETTER_VALUES[Letter.BLANK]
    return LETTER_VALUES[letter]
