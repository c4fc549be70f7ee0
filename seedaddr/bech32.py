"""Bech32 encoding of the HASH160 of a public key as a version-0 witness program."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from Crypto.Hash import RIPEMD160

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def _hash160(data: bytes) -> bytes:
    sha = hashlib.sha256(data).digest()
    return RIPEMD160.new(sha).digest()


def encode(hrp: str, data: bytes) -> str:
    """Hash ``data`` with HASH160 and encode it as a bech32 v0 address under ``hrp``."""
    witness = [0, *convert_bits(_hash160(bytes(data)))]
    witness.extend(compute_checksum(hrp, witness))
    return hrp + "1" + "".join(CHARSET[value] for value in witness)


def convert_bits(data: bytes) -> list[int]:
    """Regroup 8-bit bytes into 5-bit values, dropping any trailing partial group."""
    buffer = 0
    bits = 0
    result: list[int] = []
    for byte in data:
        buffer = ((buffer << 8) | byte) & 0xFFFFFFFF
        bits += 8
        while bits >= 5:
            bits -= 5
            result.append((buffer >> bits) & 0x1F)
    return result


def compute_checksum(hrp: str, data: Iterable[int]) -> list[int]:
    """Return the six 5-bit checksum values for ``data`` under ``hrp``."""
    values = expand_hrp(hrp) + list(data) + [0] * 6
    mod = polymod(values) ^ 1
    return [(mod >> (5 * (5 - i))) & 0x1F for i in range(6)]


def expand_hrp(hrp: str) -> list[int]:
    """Expand the human-readable part for checksum computation."""
    codes = [ord(c) & 0xFF for c in hrp]
    return [c >> 5 for c in codes] + [0] + [c & 0x1F for c in codes]


def polymod(values: Iterable[int]) -> int:
    """Compute the bech32 BCH checksum polynomial over ``values``."""
    check = 1
    for value in values:
        top = check >> 25
        check = ((check & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                check ^= gen
    return check