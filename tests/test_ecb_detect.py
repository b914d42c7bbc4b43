import pytest

from cryptopals.ecb_detect import detect_ecb, find_ecb_lines


def test_repeated_block_detected():
    assert detect_ecb(b"A" * 32) is True


def test_distinct_blocks_not_detected():
    assert detect_ecb(bytes(range(64))) is False


def test_repeat_far_apart_detected():
    block = b"YELLOW SUBMARINE"
    data = block + bytes(range(48)) + block
    assert detect_ecb(data) is True


def test_partial_trailing_block_ignored():
    data = bytes(range(16)) + bytes(range(15))
    assert detect_ecb(data) is False


def test_empty_data():
    assert detect_ecb(b"") is False


def test_find_ecb_lines_picks_repeating_line():
    repeating = (b"YELLOW SUBMARINE" * 3).hex()
    plain = bytes(range(48)).hex()
    lines = [plain + "\n", "\n", repeating + "\n"]
    assert find_ecb_lines(lines) == [repeating]


def test_find_ecb_lines_none_found():
    assert find_ecb_lines([bytes(range(32)).hex()]) == []


def test_find_ecb_lines_rejects_bad_hex():
    with pytest.raises(ValueError):
        find_ecb_lines(["zz" * 16])