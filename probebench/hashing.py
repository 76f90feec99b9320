"""Prime helpers, random word generation and string hash functions."""

from __future__ import annotations

import random
import string

_ALPHABET = string.ascii_lowercase

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime that is at least ``n``."""
    while not is_prime(n):
        n += 1
    return n


def random_string(
    min_len: int = 5, max_len: int = 10, rng: random.Random | None = None
) -> str:
    """Return a random lowercase word whose length lies in ``[min_len, max_len]``."""
    if min_len > max_len:
        raise ValueError("min_len must not exceed max_len")
    rng = rng or random.Random()
    length = rng.randint(min_len, max_len)
    return "".join(rng.choice(_ALPHABET) for _ in range(length))


def generate_words(count: int, rng: random.Random | None = None) -> list[str]:
    """Return ``count`` random words, duplicates allowed."""
    rng = rng or random.Random()
    return [random_string(rng=rng) for _ in range(count)]


def mod_hash(s: str, table_size: int) -> int:
    """Hash ``s`` with 64-bit FNV-1a and reduce it modulo ``table_size``."""
    value = _FNV_OFFSET
    for byte in s.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value % table_size


def poly_hash(s: str, table_size: int, p: int = 31, m: int = 10**9 + 9) -> int:
    """Polynomial rolling hash of ``s`` modulo ``m``, reduced modulo ``table_size``."""
    value = 0
    power = 1
    for ch in s:
        value = (value + (ord(ch) - ord("a") + 1) * power) % m
        power = (power * p) % m
    return value % table_size


def second_hash(s: str, table_size: int) -> int:
    """Step hash for double hashing; never returns zero."""
    value = 0
    for ch in s:
        value = (value * 131 + ord(ch)) % table_size
    return value or 1