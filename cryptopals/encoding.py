"""Conversions between hex, base64 and raw bytes."""

from __future__ import annotations

import base64
import string

_BASE64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
_BASE64_INDEX = {char: value for value, char in enumerate(_BASE64_ALPHABET)}
_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bytes(text: str) -> bytes:
    """Decode a hex string.

    A trailing odd digit becomes the high nibble of a final byte.
    """
    bad = [char for char in text if char not in _HEX_DIGITS]
    if bad:
        raise ValueError(f"invalid hex digit {bad[0]!r} in {text!r}")
    if len(text) % 2:
        text += "0"
    return bytes.fromhex(text)


def hex_to_base64(text: str) -> str:
    """Re-encode a hex string as base64.

    Only complete groups of six hex digits (three bytes) are encoded;
    any shorter tail is dropped, so no padding is ever produced.
    """
    data = hex_to_bytes(text)
    whole = 3 * (len(text) // 6)
    return base64.b64encode(data[:whole]).decode("ascii")


def base64_to_bytes(text: str) -> bytes:
    """Decode base64 text, honouring '=' padding.

    Characters after the last complete group of four are ignored.
    """
    out = bytearray()
    usable = len(text) - len(text) % 4
    for start in range(0, usable, 4):
        quad = text[start:start + 4]
        value = 0
        for char in quad:
            if char == "=":
                digit = 0
            else:
                try:
                    digit = _BASE64_INDEX[char]
                except KeyError:
                    raise ValueError(f"invalid base64 character {char!r}") from None
            value = (value << 6) | digit
        chunk = value.to_bytes(3, "big")
        out.append(chunk[0])
        if quad[2] != "=":
            out.append(chunk[1])
        if quad[3] != "=":
            out.append(chunk[2])
    return bytes(out)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lower-case hex."""
    return bytes(data).hex()