# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Sequence
from types import MappingProxyType

from debug import Debug

debug = Debug()


# ── Keyboard (alphabet codec) ─────────────────────────────────────
ALPHABET: str = string.ascii_uppercase
SIZE: int = len(ALPHABET)

# read-only letter → index table, built once
_LETTER_TO_INDEX = MappingProxyType({ch: i for i, ch in enumerate(ALPHABET)})


def is_letter(ch: str) -> bool:
    """True for the 26 uppercase letters the machine has keys for."""
    return ch in _LETTER_TO_INDEX


# letter → integer signal
def to_index(letter: str) -> int:
    return _LETTER_TO_INDEX[letter]


# integer signal → letter
def to_letter(index: int) -> str:
    if not (0 <= index < SIZE):
        raise ValueError(f"Signal {index} out of range 0–{SIZE - 1}")
    return ALPHABET[index]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[str] = ()) -> None:
        self.mapping: dict[str, str] = {}
        used: set[str] = set()

        for raw in pairs:
            if not isinstance(raw, str) or len(raw) != 2:
                raise ValueError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw

            if not (is_letter(a) and is_letter(b)):
                bad = a if not is_letter(a) else b
                raise ValueError(f"Symbol {bad!r} in pair {raw!r} is not a letter A–Z")
            if a == b:
                raise ValueError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ValueError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))

    def swap(self, letter: str) -> str:
        """Return the plugged partner of *letter*, or the letter itself."""
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    @property
    def pairs(self) -> list[str]:
        return [a + b for a, b in sorted(self.mapping.items()) if a < b]

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
