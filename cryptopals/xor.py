"""XOR ciphers and frequency-based attacks on them."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import cycle

from cryptopals.encoding import bytes_to_hex, hex_to_bytes

_REFERENCE_TEXT = (
    b"It was a bright cold day in April, "
    b"and the clocks were striking thirteen. Winston Smith, his chin nuzzled into his breast "
    b"in an effort to escape the vile wind, slipped quickly through the glass doors of Victory Mansions, "
    b"though not quickly enough to prevent a swirl of gritty dust from entering along with him."
)


def fixed_xor(hex1: str, hex2: str) -> str:
    """XOR two equal-length hex strings and return the result as hex."""
    first = hex_to_bytes(hex1)
    second = hex_to_bytes(hex2)
    if len(first) != len(second):
        raise ValueError("hex strings must encode the same number of bytes")
    return bytes_to_hex(bytes(a ^ b for a, b in zip(first, second)))


def single_byte_xor(data: bytes, key: int) -> bytes:
    """XOR every byte of data with a single key byte."""
    if not 0 <= key <= 0xFF:
        raise ValueError("key must be a single byte")
    return bytes(b ^ key for b in data)


def letter_frequencies(data: bytes, length: int) -> list[float]:
    """Relative frequency of each ASCII code among the first length bytes.

    Bytes of 128 and above are not counted but still weigh in the divisor.
    """
    frequencies = [0.0] * 128
    if length <= 0:
        return frequencies
    for byte in data[:length]:
        if byte < 128:
            frequencies[byte] += 1.0 / length
    return frequencies


def cipher_score(data: bytes) -> float:
    """Squared distance of data's letter frequencies from English text.

    Lower means more like English.
    """
    length = len(data)
    observed = letter_frequencies(data, length)
    expected = letter_frequencies(_REFERENCE_TEXT, length)
    return sum((o - e) ** 2 for o, e in zip(observed, expected))


def find_single_xor_key(data: bytes) -> int:
    """The key byte whose decryption of data looks most like English."""
    return min(range(256), key=lambda key: cipher_score(single_byte_xor(data, key)))


def crack_single_xor(data: bytes) -> tuple[int, bytes]:
    """Recover the key and plaintext of a single-byte XOR ciphertext."""
    key = find_single_xor_key(data)
    return key, single_byte_xor(data, key)


def most_scrambled_line(lines: Iterable[str]) -> str:
    """The hex line whose bytes look least like English.

    Ties go to the earliest line.
    """
    best_line = None
    best_score = 0.0
    for line in lines:
        text = line.strip()
        if not text:
            continue
        score = cipher_score(hex_to_bytes(text))
        if best_line is None or score > best_score:
            best_line, best_score = text, score
    if best_line is None:
        raise ValueError("no lines to examine")
    return best_line


def repeating_key_xor(data: bytes, key: bytes) -> bytes:
    """XOR data against key repeated to its length."""
    if not key:
        raise ValueError("key must not be empty")
    return bytes(a ^ b for a, b in zip(data, cycle(key)))


def hamming_distance(first: bytes, second: bytes, length: int) -> int:
    """Number of differing bits in the first length bytes of two strings."""
    if len(first) < length or len(second) < length:
        raise ValueError("inputs are shorter than the requested length")
    return sum((a ^ b).bit_count() for a, b in zip(first[:length], second[:length]))


def keysize_scores(data: bytes, max_keysize: int = 40) -> dict[int, float]:
    """Normalised edit distance between consecutive blocks, per key size.

    Smaller scores suggest a likelier key size.
    """
    scores = {}
    for keysize in range(1, max_keysize + 1):
        running = 0.0
        blocks = 0
        for i in range(len(data) // keysize):
            first = data[i * keysize:(i + 1) * keysize]
            second = data[(i + 1) * keysize:(i + 2) * keysize]
            try:
                distance = hamming_distance(first, second, keysize)
            except ValueError:
                continue
            running += distance / keysize
            blocks += 1
        scores[keysize] = running / (blocks + 1)
    return scores


def find_repeating_key(data: bytes, keysize: int) -> bytes:
    """Guess a repeating XOR key of the given size, one byte at a time."""
    if keysize < 1:
        raise ValueError("keysize must be positive")
    return bytes(find_single_xor_key(data[offset::keysize]) for offset in range(keysize))