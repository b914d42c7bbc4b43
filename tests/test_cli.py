import base64

from cryptopals.cli import main
from cryptopals.encoding import base64_to_bytes


def test_hex2base64_default(capsys):
    assert main(["hex2base64"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == (
        "The base64 representation is "
        "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"
    )


def test_hex2base64_round_trip(capsys):
    hex_input = "00ff10203040"
    assert main(["hex2base64", hex_input]) == 0
    encoded = capsys.readouterr().out.strip().rsplit(" ", 1)[1]
    assert base64_to_bytes(encoded) == bytes.fromhex(hex_input)


def test_fixed_xor_default(capsys):
    assert main(["fixed-xor"]) == 0
    assert capsys.readouterr().out.strip() == (
        "The answer is 746865206b696420646f6e277420706c6179"
    )


def test_fixed_xor_length_mismatch(capsys):
    assert main(["fixed-xor", "00", "0000"]) == 1
    assert "cryptopals:" in capsys.readouterr().err


def test_repeating_xor_default(capsys):
    assert main(["repeating-xor"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith(
        "0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324272765272a282b2f20"
        "430a652e2c652a3124333a653e2b2027630c692b20283165286326302e27282f"
    )


def test_single_xor_reports_string(capsys):
    assert main(["single-xor"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The unencoded string is '")


def test_break_repeating_prints_each_keysize(tmp_path, capsys):
    path = tmp_path / "6.txt"
    encoded = base64.b64encode(b"some plain english words to encrypt" * 4).decode()
    path.write_text("\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60)) + "\n")
    assert main(["break-repeating", str(path)]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("For keysize")]
    assert len(lines) == 38
    assert lines[0].startswith("For keysize 2 ")


def test_detect_ecb_file(tmp_path, capsys):
    repeating = (b"YELLOW SUBMARINE" * 2).hex()
    plain = bytes(range(32)).hex()
    path = tmp_path / "8.txt"
    path.write_text(f"{plain}\n{repeating}\n")
    assert main(["detect-ecb", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.strip() == f"The line that has been encoded is {repeating}"


def test_aes_ecb_missing_file(tmp_path, capsys):
    assert main(["aes-ecb", str(tmp_path / "absent.txt")]) == 1
    assert "cryptopals:" in capsys.readouterr().err


def test_aes_ecb_rejects_partial_block(tmp_path, capsys):
    path = tmp_path / "7.txt"
    path.write_text(base64.b64encode(bytes(15)).decode() + "\n")
    assert main(["aes-ecb", str(path)]) == 1
    assert "multiple of 16" in capsys.readouterr().err