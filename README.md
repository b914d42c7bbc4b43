# cryptopals

A small pure-Python toolkit for introductory cryptanalysis exercises:
hex and base64 conversion, fixed and repeating-key XOR, breaking
single-byte and repeating-key XOR by letter frequency, arithmetic in
GF(2^8) with the AES S-boxes derived from it, AES-128 ECB decryption, and
spotting ECB-encrypted data by its repeated blocks.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

Installing the package provides a `cryptopals` command with one
sub-command per exercise. Every positional argument is optional and
falls back to the exercise's standard input value.

| Sub-command | What it does |
| --- | --- |
| `hex2base64 [HEX]` | prints the base64 form of a hex string |
| `fixed-xor [HEX1] [HEX2]` | XORs two equal-length hex strings, prints hex |
| `single-xor [HEX]` | cracks a single-byte XOR ciphertext, prints the plaintext |
| `detect-xor [FILE]` | finds the hex line in FILE (default `4.txt`) that looks least like English, prints it and its decryption |
| `repeating-xor [MESSAGE] [KEY]` | encrypts MESSAGE with repeating-key XOR (default key `ICE`), prints hex |
| `break-repeating [FILE] [--min-keysize N] [--max-keysize M]` | reads base64 from FILE (default `6.txt`) and, for each key size from N (default 2) up to but not including M (default 40), prints the guessed decryption |
| `aes-ecb [FILE] [--key KEY]` | reads base64 from FILE (default `7.txt`), decrypts it with AES-128 ECB (default key `YELLOW SUBMARINE`), strips padding and prints the text |
| `detect-ecb [FILE]` | prints every hex line of FILE (default `8.txt`) that contains a repeated 16-byte block |

If a file cannot be read or the input is malformed, the command prints
`cryptopals: <message>` to standard error and exits with status 1.

```
cryptopals hex2base64
cryptopals aes-ecb 7.txt --key "YELLOW SUBMARINE"
cryptopals --help
```

## Library

### `cryptopals.encoding`

- `hex_to_bytes(text)` decodes hex; an odd trailing digit becomes the high
  nibble of a final byte. Non-hex characters raise `ValueError`.
- `hex_to_base64(text)` re-encodes hex as base64, using only complete
  groups of six hex digits, so no padding is ever produced.
- `base64_to_bytes(text)` decodes base64, honouring `=` padding and
  ignoring characters after the last complete group of four.
- `bytes_to_hex(data)` encodes bytes as lower-case hex.

```python
from cryptopals.encoding import hex_to_base64

hex_to_base64(
    "49276d206b696c6c696e6720796f757220627261696e206c696b65"
    "206120706f69736f6e6f7573206d757368726f6f6d"
)
# 'SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t'
```

### `cryptopals.xor`

- `fixed_xor(hex1, hex2)` XORs two hex strings encoding the same number of
  bytes and returns hex.
- `single_byte_xor(data, key)` and `repeating_key_xor(data, key)` apply XOR
  with one byte or with a repeating key.
- `letter_frequencies(data, length)` gives the relative frequency of each
  ASCII code among the first `length` bytes; `cipher_score(data)` is the
  squared distance of those frequencies from a sample of English text
  (lower looks more like English).
- `find_single_xor_key(data)` and `crack_single_xor(data)` recover a
  single-byte key (and the plaintext) by that score.
- `most_scrambled_line(lines)` returns the hex line with the highest score.
- `hamming_distance(first, second, length)` counts differing bits in the
  first `length` bytes; `keysize_scores(data, max_keysize=40)` maps each key
  size to a normalised distance between consecutive blocks;
  `find_repeating_key(data, keysize)` guesses a repeating key one byte at a
  time.

```python
from cryptopals.xor import fixed_xor

fixed_xor("1c0111001f010100061a024b53535009181c",
          "686974207468652062756c6c277320657965")
# '746865206b696420646f6e277420706c6179'
```

### `cryptopals.galois`

`gf_multiply(a, b)` multiplies bytes in GF(2^8) modulo the AES polynomial,
`affine_transform(x)` is the AES affine map, `rotate_word(word, n)` rotates
a word left by `n` bytes, `gf_inverse_table()` returns the 256
multiplicative inverses (zero maps to zero) and `build_sboxes()` returns the
S-box and inverse S-box built from them. Both tables are computed once and
cached.

### `cryptopals.aes`

AES-128 decryption in ECB mode, with its parts exposed: `key_expansion`,
`round_key`, `add_round_key`, `inv_shift_rows`, `inv_mix_columns`,
`decrypt_block` and `decrypt_ecb(data, key)`. `strip_padding(data)` removes
as many trailing bytes as the value of the last byte; it does not check
that the removed bytes all carry that value.

### `cryptopals.ecb_detect`

`detect_ecb(data)` reports whether any complete 16-byte block repeats;
`find_ecb_lines(lines)` returns the hex lines for which that holds.

## What it does not do

- AES is decryption only, with 128-bit keys and ECB mode; there is no
  encryption and no other mode.
- The challenge data files (`4.txt`, `6.txt`, `7.txt`, `8.txt`) are not
  included; pass their paths to the commands that read them.