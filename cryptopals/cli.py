"""Command-line entry point for the set 1 challenges."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cryptopals.aes import decrypt_ecb, strip_padding
from cryptopals.ecb_detect import find_ecb_lines
from cryptopals.encoding import base64_to_bytes, bytes_to_hex, hex_to_base64, hex_to_bytes
from cryptopals.xor import (
    crack_single_xor,
    find_repeating_key,
    fixed_xor,
    most_scrambled_line,
    repeating_key_xor,
)

_DEFAULT_HEX = (
    "49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f69736f6e6f7573206d757368726f6f6d"
)
_DEFAULT_XOR_1 = "1c0111001f010100061a024b53535009181c"
_DEFAULT_XOR_2 = "686974207468652062756c6c277320657965"
_DEFAULT_SINGLE = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"
_DEFAULT_MESSAGE = "Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal"
_DEFAULT_KEY = "ICE"
_DEFAULT_AES_KEY = "YELLOW SUBMARINE"


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _read_base64_file(path: str) -> bytes:
    content = Path(path).read_text()
    return base64_to_bytes("".join(line.strip() for line in content.splitlines()))


def _read_lines(path: str) -> list[str]:
    return Path(path).read_text().splitlines()


def _hex2base64(args: argparse.Namespace) -> None:
    print(f"The base64 representation is {hex_to_base64(args.hex)}")


def _fixed_xor(args: argparse.Namespace) -> None:
    print(f"The answer is {fixed_xor(args.hex1, args.hex2)}")


def _single_xor(args: argparse.Namespace) -> None:
    _, plain = crack_single_xor(hex_to_bytes(args.hex))
    print(f"The unencoded string is '{_text(plain)}'")


def _detect_xor(args: argparse.Namespace) -> None:
    line = most_scrambled_line(_read_lines(args.file))
    _, plain = crack_single_xor(hex_to_bytes(line))
    print(f"The encoded line is {line}")
    print(f"The decoded line is '{_text(plain)}'")


def _repeating_xor(args: argparse.Namespace) -> None:
    encrypted = bytes_to_hex(repeating_key_xor(args.message.encode(), args.key.encode()))
    print(
        f"When the string {args.message} is XOR'D against the key {args.key}, "
        f"we get {encrypted}"
    )


def _break_repeating(args: argparse.Namespace) -> None:
    data = _read_base64_file(args.file)
    for keysize in range(args.min_keysize, args.max_keysize):
        key = find_repeating_key(data, keysize)
        decoded = repeating_key_xor(data, key)
        print(f"For keysize {keysize} unencoded message is {_text(decoded)}")


def _aes_ecb(args: argparse.Namespace) -> None:
    data = _read_base64_file(args.file)
    plain = strip_padding(decrypt_ecb(data, args.key.encode()))
    print(f"The decoded message is {_text(plain)}")


def _detect_ecb(args: argparse.Namespace) -> None:
    for line in find_ecb_lines(_read_lines(args.file)):
        print(f"The line that has been encoded is {line}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cryptopals", description="Set 1 challenges.")
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("hex2base64", help="re-encode hex as base64")
    cmd.add_argument("hex", nargs="?", default=_DEFAULT_HEX)
    cmd.set_defaults(handler=_hex2base64)

    cmd = commands.add_parser("fixed-xor", help="XOR two hex strings")
    cmd.add_argument("hex1", nargs="?", default=_DEFAULT_XOR_1)
    cmd.add_argument("hex2", nargs="?", default=_DEFAULT_XOR_2)
    cmd.set_defaults(handler=_fixed_xor)

    cmd = commands.add_parser("single-xor", help="crack a single-byte XOR")
    cmd.add_argument("hex", nargs="?", default=_DEFAULT_SINGLE)
    cmd.set_defaults(handler=_single_xor)

    cmd = commands.add_parser("detect-xor", help="find and crack the XOR-encrypted line")
    cmd.add_argument("file", nargs="?", default="4.txt")
    cmd.set_defaults(handler=_detect_xor)

    cmd = commands.add_parser("repeating-xor", help="encrypt with a repeating XOR key")
    cmd.add_argument("message", nargs="?", default=_DEFAULT_MESSAGE)
    cmd.add_argument("key", nargs="?", default=_DEFAULT_KEY)
    cmd.set_defaults(handler=_repeating_xor)

    cmd = commands.add_parser("break-repeating", help="break a repeating-key XOR file")
    cmd.add_argument("file", nargs="?", default="6.txt")
    cmd.add_argument("--min-keysize", type=int, default=2)
    cmd.add_argument("--max-keysize", type=int, default=40)
    cmd.set_defaults(handler=_break_repeating)

    cmd = commands.add_parser("aes-ecb", help="decrypt an AES-128 ECB file")
    cmd.add_argument("file", nargs="?", default="7.txt")
    cmd.add_argument("--key", default=_DEFAULT_AES_KEY)
    cmd.set_defaults(handler=_aes_ecb)

    cmd = commands.add_parser("detect-ecb", help="find ECB-encrypted lines")
    cmd.add_argument("file", nargs="?", default="8.txt")
    cmd.set_defaults(handler=_detect_ecb)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one challenge; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (OSError, ValueError) as error:
        print(f"cryptopals: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())