"""Hex and base64 conversion, XOR cryptanalysis, GF(2^8) arithmetic, AES-128 ECB decryption and ECB detection."""

__version__ = "0.1.0"