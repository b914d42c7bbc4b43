"""Arithmetic in GF(2^8) and the AES substitution boxes built from it."""

from __future__ import annotations

from functools import lru_cache


def gf_multiply(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo the AES polynomial."""
    a &= 0xFF
    b &= 0xFF
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = ((a << 1) ^ (0x1B if a & 0x80 else 0x00)) & 0xFF
        b >>= 1
    return result


def affine_transform(x: int) -> int:
    """The affine map applied to an inverse to give its S-box entry."""
    result = 0
    for i in range(8):
        bit = 0
        for offset in (0, 4, 5, 6, 7):
            bit ^= (x >> ((i + offset) % 8)) & 1
        result |= bit << i
    return result ^ 0x63


def rotate_word(word: bytes, n: int) -> bytes:
    """Rotate a word left by n bytes; negative n rotates right."""
    word = bytes(word)
    if not word:
        return word
    n %= len(word)
    return word[n:] + word[:n]


@lru_cache(maxsize=None)
def gf_inverse_table() -> bytes:
    """Multiplicative inverse of every byte; zero maps to zero."""
    inverse = bytearray(256)
    for i in range(256):
        for j in range(256):
            if gf_multiply(i, j) == 1:
                inverse[i] = j
    return bytes(inverse)


@lru_cache(maxsize=None)
def build_sboxes() -> tuple[bytes, bytes]:
    """The AES S-box and its inverse."""
    inverse = gf_inverse_table()
    sbox = bytearray(256)
    inverse_sbox = bytearray(256)
    for i, value in enumerate(inverse):
        sbox[i] = affine_transform(value)
        inverse_sbox[sbox[i]] = i
    return bytes(sbox), bytes(inverse_sbox)