"""Spotting ECB-mode ciphertext by its repeated blocks."""

from __future__ import annotations

from collections.abc import Iterable

from cryptopals.encoding import hex_to_bytes

BLOCK_SIZE = 16


def detect_ecb(data: bytes) -> bool:
    """True if any complete 16-byte block of data appears more than once."""
    seen: set[bytes] = set()
    for start in range(0, len(data) - BLOCK_SIZE + 1, BLOCK_SIZE):
        block = bytes(data[start:start + BLOCK_SIZE])
        if block in seen:
            return True
        seen.add(block)
    return False


def find_ecb_lines(lines: Iterable[str]) -> list[str]:
    """The hex lines whose decoded bytes contain a repeated block."""
    found = []
    for line in lines:
        text = line.strip()
        if text and detect_ecb(hex_to_bytes(text)):
            found.append(text)
    return found