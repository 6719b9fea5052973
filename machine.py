# machine.py  ──────────────────────────────────────────────────────
from __future__ import annotations

from typing import Tuple

from debug import Debug
from keyboard_and_plugboard import SIZE, Plugboard, is_letter, to_index, to_letter
from rotor_and_reflector import Reflector, Rotor

debug = Debug()

RotorTriple = Tuple[Rotor, Rotor, Rotor]


class Machine:
    """
    Three-rotor machine. ``rotors[0]`` is the fast rotor: it is entered first
    on the way in, left last on the way out, and steps on every letter.

    Rotor positions persist between :meth:`encrypt` calls.
    """

    def __init__(self, rotors: RotorTriple, reflector: Reflector, plugboard: Plugboard | None = None) -> None:
        if len(rotors) != 3:
            raise ValueError("Machine needs exactly 3 rotors")

        self.rotors: RotorTriple = tuple(rotors)
        self.reflector = reflector
        self.plugboard = plugboard if plugboard is not None else Plugboard()

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> Tuple[int, int, int]:
        return tuple(r.position for r in self.rotors)

    def set_positions(self, positions: Tuple[int, int, int]) -> None:
        """Turn each rotor to a 0-based position, fast rotor first."""
        if len(positions) != 3:
            raise ValueError("Need exactly 3 rotor positions")
        for rotor, pos in zip(self.rotors, positions):
            rotor.position = pos % SIZE

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        fast, middle, slow = self.rotors
        if fast.step():
            if middle.step():
                slow.step()
        debug.log("stepping", f"Rotor pos {list(self.positions)}")

    # ── encipher one symbol  ────────────────────────────────────

    def encipher_letter(self, letter: str) -> str:
        """Run one valid letter through the machine, then step."""
        signal = to_index(self.plugboard.swap(letter))

        for rotor in self.rotors:
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.backward(signal)

        out_ch = self.plugboard.swap(to_letter(signal))
        debug.log("encipher", f"{letter}->{out_ch}")

        self._step_rotors()
        return out_ch

    def encrypt(self, message: str) -> str:
        """Encipher every A–Z letter of *message*; anything else is dropped."""
        return "".join(self.encipher_letter(ch) for ch in message if is_letter(ch))

    decrypt = encrypt     # reciprocal: same settings, same operation

    def __repr__(self) -> str:
        return f"<Machine rotors={list(self.rotors)} {self.reflector!r} {self.plugboard!r}>"
