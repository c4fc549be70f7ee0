"""Address construction from public keys."""

from __future__ import annotations

from seedaddr import bech32


def p2wpkh(hrp: str, pubkey: bytes) -> str:
    """Return the native SegWit (P2WPKH) address for a serialized public key."""
    return bech32.encode(hrp, pubkey)