"""Base58 text encoding of JSON values.

The JSON value is serialized compactly, encoded as UTF-8 and the resulting
bytes are read as one big-endian integer that is written out in base 58.
Each leading zero byte becomes one leading "1".
"""

from typing import Any, Final

from relay.utils import compact_json

ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_IDX: Final[dict[str, int]] = {c: i for i, c in enumerate(ALPHABET)}


def encode_bytes(data: bytes) -> str:
    n_zeros = 0
    for b in data:
        if b != 0:
            break
        n_zeros += 1

    num = int.from_bytes(data, "big")
    digits = []
    while num > 0:
        num, rem = divmod(num, 58)
        digits.append(ALPHABET[rem])
    digits.reverse()

    return ALPHABET[0] * n_zeros + "".join(digits)


def encode(value: Any) -> str:
    """Encode a JSON value as base58 text."""
    return encode_bytes(compact_json(value).encode("utf-8"))


def decode(text: str) -> bytes:
    """Decode base58 text back to the exact bytes it was produced from."""
    n_zeros = 0
    for c in text:
        if c != ALPHABET[0]:
            break
        n_zeros += 1

    num = 0
    for c in text:
        if c not in _ALPHABET_IDX:
            raise ValueError(f"Invalid base58 character: {c!r}")
        num = num * 58 + _ALPHABET_IDX[c]

    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * n_zeros + body
