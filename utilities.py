# utilities.py
from __future__ import annotations

from typing import List

BLOCK = 5


def split_blocks(text: str, block: int = BLOCK) -> List[str]:
    if block < 1:
        raise ValueError("block size must be positive")
    return [text[i : i + block] for i in range(0, len(text), block)]


def format_blocks(text: str, block: int = BLOCK) -> str:
    """Group ciphertext the way it was sent by hand: ``ABCDE FGHIJ KL``."""
    return " ".join(split_blocks(text, block))


__all__ = ["BLOCK", "split_blocks", "format_blocks"]
