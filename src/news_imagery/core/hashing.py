"""Stable string hashing used for deterministic tie-breaking."""

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

HashFn = Callable[[str], float]


def simple_hash(text: str) -> float:
    """
    Map a string to a stable value in [0, 1).

    Rolling 32-bit hash (h = h * 31 + ord(ch), wrapped to 32 bits), top bit
    dropped, scaled by 2**31. Same input, same output, on every interpreter
    and platform.
    """
    h = 0
    for ch in text or "":
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    return (h & 0x7FFFFFFF) / 0x80000000


def deterministic_pick(
    key: str, options: Sequence[T], hash_fn: HashFn = simple_hash
) -> Optional[T]:
    """Pick options[floor(hash_fn(key) * len(options))], or None if empty."""
    if not options:
        return None
    index = int(hash_fn(key) * len(options))
    # Guards against custom hash functions returning exactly 1.0
    return options[min(index, len(options) - 1)]
