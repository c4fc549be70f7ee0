"""BIP-39 mnemonic validation and seed derivation."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from pathlib import Path


class MnemonicError(ValueError):
    """Raised when a mnemonic is malformed or fails its checksum."""


def load_wordlist(path: str | Path) -> list[str]:
    """Read a newline-separated wordlist file."""
    text = Path(path).read_text(encoding="utf-8")
    return [line.rstrip("\r") for line in text.split("\n")]


def mnemonic_to_entropy(mnemonic: str, wordlist: Sequence[str]) -> bytes:
    """Decode a 12- or 24-word mnemonic to its entropy, verifying the checksum."""
    words = mnemonic.split()
    if len(words) not in (12, 24):
        raise MnemonicError("words count must be 12 or 24")

    positions: dict[str, int] = {}
    for index, word in enumerate(wordlist):
        positions.setdefault(word, index)

    value = 0
    for word in words:
        try:
            index = positions[word]
        except KeyError:
            raise MnemonicError(f"invalid word: {word}") from None
        value = (value << 11) | (index & 0x7FF)

    total_bits = 11 * len(words)
    checksum_bits = total_bits // 32
    entropy_bits = total_bits - checksum_bits

    entropy = (value >> checksum_bits).to_bytes(entropy_bits // 8, "big")
    checksum = value & ((1 << checksum_bits) - 1)

    digest = int.from_bytes(hashlib.sha256(entropy).digest(), "big")
    if checksum != digest >> (256 - checksum_bits):
        raise MnemonicError("checksum mismatch")
    return entropy


def seed_from_mnemonic(mnemonic: str, passphrase: str = "") -> bytes:
    """Derive the 64-byte BIP-39 seed with PBKDF2-HMAC-SHA512."""
    salt = f"mnemonic{passphrase}"
    return hashlib.pbkdf2_hmac(
        "sha512", mnemonic.encode("utf-8"), salt.encode("utf-8"), 2048, 64
    )