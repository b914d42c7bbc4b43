import pytest

from cryptopals.galois import (
    affine_transform,
    build_sboxes,
    gf_inverse_table,
    gf_multiply,
    rotate_word,
)


def test_gf_multiply_worked_example():
    assert gf_multiply(0x57, 0x83) == 0xC1


@pytest.mark.parametrize("a", [0, 1, 0x53, 0x80, 0xFF])
def test_gf_multiply_identities(a):
    assert gf_multiply(a, 1) == a
    assert gf_multiply(a, 0) == 0


@pytest.mark.parametrize("a,b", [(3, 7), (0x80, 0x02), (0xCA, 0x53), (0xFF, 0xFE)])
def test_gf_multiply_commutes(a, b):
    assert gf_multiply(a, b) == gf_multiply(b, a)


@pytest.mark.parametrize("a,b,c", [(0x57, 0x13, 0x83), (0xFF, 0x01, 0x80)])
def test_gf_multiply_distributes_over_xor(a, b, c):
    assert gf_multiply(a, b ^ c) == gf_multiply(a, b) ^ gf_multiply(a, c)


def test_gf_multiply_reduction_by_two():
    assert gf_multiply(0x80, 2) == 0x1B


def test_gf_inverse_table_is_inverse():
    table = gf_inverse_table()
    assert len(table) == 256
    assert table[0] == 0
    assert all(gf_multiply(a, table[a]) == 1 for a in range(1, 256))


def test_affine_transform_of_zero():
    assert affine_transform(0) == 0x63


def test_affine_transform_is_bijective():
    assert sorted(affine_transform(x) for x in range(256)) == list(range(256))


def test_sboxes_known_entries():
    sbox, inverse_sbox = build_sboxes()
    assert sbox[0] == 0x63
    assert inverse_sbox[0] == 0x52


def test_sboxes_are_inverse_permutations():
    sbox, inverse_sbox = build_sboxes()
    assert sorted(sbox) == list(range(256))
    assert all(inverse_sbox[sbox[i]] == i for i in range(256))


def test_rotate_word_full_turn_is_identity():
    word = b"\x09\xcf\x4f\x3c"
    assert rotate_word(word, 4) == word
    assert rotate_word(word, 0) == word


def test_rotate_word_left_then_right():
    word = b"\x09\xcf\x4f\x3c"
    assert rotate_word(rotate_word(word, 1), 3) == word
    assert rotate_word(word, -1) == rotate_word(word, 3)


def test_rotate_word_moves_first_byte_to_end():
    word = b"\x09\xcf\x4f\x3c"
    rotated = rotate_word(word, 1)
    assert rotated[-1] == word[0]
    assert rotated[:3] == word[1:]


def test_rotate_word_empty():
    assert rotate_word(b"", 3) == b""