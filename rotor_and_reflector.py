# rotor_and_reflector.py
from __future__ import annotations
from typing import Dict, Tuple

from debug import Debug
from keyboard_and_plugboard import ALPHABET, SIZE, to_index

debug = Debug()


# ── Wheel database ────────────────────────────────────────────────
# https://en.wikipedia.org/wiki/Enigma_rotor_details
ROTOR_WIRINGS: Dict[int, Tuple[str, str]] = {
    1: ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "R"),
    2: ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "F"),
    3: ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "W"),
    4: ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "K"),
    5: ("VZBRGITYUPSDNHLXAWMJQOFECK", "A"),
}

REFLECTOR_WIRINGS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}


class Rotor:
    def __init__(self, wiring: str, notch: str, position: int = 0, number: int | None = None) -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ValueError("wiring must be a permutation of alphabet")
        if len(notch) != 1 or notch not in ALPHABET:
            raise ValueError(f"Notch {notch!r} must be a single letter A–Z")

        self.number = number

        # integer lookup tables
        self._fwd = [to_index(c) for c in wiring]
        self._rev = [wiring.index(c) for c in ALPHABET]

        self.notch = to_index(notch)
        self.position = position % SIZE

    @classmethod
    def load_wiring(cls, number: int, position: int = 0) -> "Rotor":
        """Build historical rotor *number* (1–5) at the 0-based *position*."""
        # True hashes like 1; a bool is not a rotor number
        if isinstance(number, bool) or number not in ROTOR_WIRINGS:
            raise ValueError(f"Unknown rotor number {number!r}; expected 1–5")
        wiring, notch = ROTOR_WIRINGS[number]
        return cls(wiring, notch, position, number=number)

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True when the new position is the notch (carry)."""
        self.position = (self.position + 1) % SIZE
        hit = self.position == self.notch
        debug.log("stepping", f"Rotor {self.number} pos {self.position}, notch_hit={hit}")
        return hit

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        mapped = self._fwd[(sig + self.position) % SIZE]
        out = (mapped - self.position) % SIZE
        debug.log("rotor", f"{self.number} fwd {sig}->{out}")
        return out

    def backward(self, sig: int) -> int:
        mapped = self._rev[(sig + self.position) % SIZE]
        out = (mapped - self.position) % SIZE
        debug.log("rotor", f"{self.number} bwd {sig}->{out}")
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.number} pos={self.position} notch={ALPHABET[self.notch]}>"


class Reflector:
    def __init__(self, wiring: str, letter: str | None = None) -> None:
        if len(wiring) != SIZE or sorted(wiring) != sorted(ALPHABET):
            raise ValueError("Reflector wiring must be a permutation of the alphabet")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = to_index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.letter = letter
        self._map = [to_index(c) for c in wiring]

    @classmethod
    def load_wiring(cls, letter: str) -> "Reflector":
        try:
            wiring = REFLECTOR_WIRINGS[letter]
        except (KeyError, TypeError):
            raise ValueError(f"Unknown reflector {letter!r}; expected A, B or C") from None
        return cls(wiring, letter)

    def reflect(self, sig: int) -> int:
        out = self._map[sig]
        debug.log("reflector", f"{sig}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.letter}>"
