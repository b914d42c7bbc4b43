"""AES-128 decryption in ECB mode."""

from __future__ import annotations

from collections.abc import Sequence

from cryptopals.galois import build_sboxes, gf_multiply, rotate_word

BLOCK_SIZE = 16
KEY_SIZE = 16
ROUNDS = 10

_RCON = (0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)

_INV_MIX_MATRIX = (
    (14, 11, 13, 9),
    (9, 14, 11, 13),
    (13, 9, 14, 11),
    (11, 13, 9, 14),
)


def key_expansion(key: bytes, sbox: bytes) -> list[bytes]:
    """Expand a 16-byte key into the 44 four-byte words of the key schedule."""
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    words = [key[i:i + 4] for i in range(0, KEY_SIZE, 4)]
    for i in range(4, 4 * (ROUNDS + 1)):
        temp = words[i - 1]
        if i % 4 == 0:
            temp = bytes(sbox[b] for b in rotate_word(temp, 1))
            temp = bytes([temp[0] ^ _RCON[i // 4]]) + temp[1:]
        words.append(bytes(a ^ b for a, b in zip(temp, words[i - 4])))
    return words


def round_key(words: Sequence[bytes], round_number: int) -> bytes:
    """The 16-byte key for one round, taken from the key schedule."""
    if not 0 <= round_number <= ROUNDS:
        raise ValueError(f"round must be between 0 and {ROUNDS}")
    if len(words) < 4 * (round_number + 1):
        raise ValueError("key schedule is too short")
    return b"".join(words[4 * round_number:4 * round_number + 4])


def add_round_key(state: bytes, key: bytes) -> bytes:
    """XOR a state with a round key."""
    if len(state) != BLOCK_SIZE or len(key) != BLOCK_SIZE:
        raise ValueError(f"state and key must both be {BLOCK_SIZE} bytes")
    return bytes(a ^ b for a, b in zip(state, key))


def inv_shift_rows(state: bytes) -> bytes:
    """Shift row r of the column-major state right by r positions."""
    if len(state) != BLOCK_SIZE:
        raise ValueError(f"state must be {BLOCK_SIZE} bytes")
    return bytes(
        state[row + 4 * ((col - row) % 4)]
        for col in range(4)
        for row in range(4)
    )


def inv_mix_columns(state: bytes) -> bytes:
    """Multiply every column of the state by the inverse MixColumns matrix."""
    if len(state) != BLOCK_SIZE:
        raise ValueError(f"state must be {BLOCK_SIZE} bytes")
    out = bytearray()
    for col in range(4):
        column = state[4 * col:4 * col + 4]
        for matrix_row in _INV_MIX_MATRIX:
            value = 0
            for coefficient, byte in zip(matrix_row, column):
                value ^= gf_multiply(coefficient, byte)
            out.append(value)
    return bytes(out)


def _inv_sub_bytes(state: bytes, inverse_sbox: bytes) -> bytes:
    return bytes(inverse_sbox[b] for b in state)


def decrypt_block(block: bytes, words: Sequence[bytes], inverse_sbox: bytes) -> bytes:
    """Decrypt one 16-byte block with an expanded key."""
    state = add_round_key(bytes(block), round_key(words, ROUNDS))
    state = _inv_sub_bytes(inv_shift_rows(state), inverse_sbox)
    for round_number in range(ROUNDS - 1, 0, -1):
        state = add_round_key(state, round_key(words, round_number))
        state = inv_mix_columns(state)
        state = _inv_sub_bytes(inv_shift_rows(state), inverse_sbox)
    return add_round_key(state, round_key(words, 0))


def decrypt_ecb(data: bytes, key: bytes) -> bytes:
    """Decrypt AES-128 ECB ciphertext; padding is left in place."""
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"ciphertext length must be a multiple of {BLOCK_SIZE}")
    sbox, inverse_sbox = build_sboxes()
    words = key_expansion(key, sbox)
    return b"".join(
        decrypt_block(data[start:start + BLOCK_SIZE], words, inverse_sbox)
        for start in range(0, len(data), BLOCK_SIZE)
    )


def strip_padding(data: bytes) -> bytes:
    """Remove as many trailing bytes as the last byte's value."""
    if not data:
        raise ValueError("cannot strip padding from empty data")
    padding = data[-1]
    if padding > len(data):
        raise ValueError("padding length exceeds data length")
    return bytes(data[:len(data) - padding])