# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import List, Sequence

from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import REFLECTOR_WIRINGS, ROTOR_WIRINGS
from settings import DEFAULT_SETTINGS_FILE, MachineSettings, RotorSetting

MAX_PAIRS = len(ALPHABET) // 2
DEFAULT_PAIRS = 10

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, MAX_PAIRS)
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(rng: Random | SystemRandom, pairs: int = DEFAULT_PAIRS) -> MachineSettings:
    numbers = rng.sample(sorted(ROTOR_WIRINGS), 3)
    rotors = tuple(RotorSetting(n, rng.randint(1, len(ALPHABET))) for n in numbers)
    reflector = rng.choice(sorted(REFLECTOR_WIRINGS))
    return MachineSettings(rotors, reflector, tuple(choose_pairs(pairs, rng)))


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate random machine settings")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path(DEFAULT_SETTINGS_FILE),
        help=f"Destination JSON file (default: {DEFAULT_SETTINGS_FILE})",
    )
    p.add_argument(
        "--pairs",
        type=int,
        default=DEFAULT_PAIRS,
        choices=range(0, MAX_PAIRS + 1),
        metavar=f"0-{MAX_PAIRS}",
        help=f"Number of plugboard pairs (default: {DEFAULT_PAIRS})",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    cfg = generate_settings(build_rng(args.seed), args.pairs)

    args.outfile.write_text(json.dumps(cfg.to_dict(), indent=2), encoding="utf-8")
    print(f"Wrote {args.outfile}\n"
        f"   rotors      : {[r.number for r in cfg.rotors]}\n"
        f"   positions   : {[r.position for r in cfg.rotors]}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   plug pairs  : {len(cfg.plugs)}")


if __name__ == "__main__":
    main()
