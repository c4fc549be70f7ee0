"""BIP-32 hierarchical deterministic private key derivation on secp256k1."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
HARDENED_OFFSET = 0x8000_0000
_MAX_INDEX = 0xFFFF_FFFF


def _check_secret(key: bytes) -> int:
    if len(key) != 32:
        raise ValueError("private key must be 32 bytes")
    value = int.from_bytes(key, "big")
    if not 0 < value < CURVE_ORDER:
        raise ValueError("private key out of range")
    return value


def compressed_public_key(key: bytes) -> bytes:
    """Return the 33-byte SEC1 compressed public point for a 32-byte private key."""
    secret = ec.derive_private_key(_check_secret(key), ec.SECP256K1())
    return secret.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )


def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


@dataclass(frozen=True)
class ExtPriv:
    """An extended private key: secret, chain code and position in the tree."""

    key: bytes
    chain: bytes
    depth: int = 0
    index: int = 0
    parent_fpr: bytes = bytes(4)

    @classmethod
    def new_master(cls, seed: bytes) -> ExtPriv:
        """Build the master node from a seed."""
        digest = _hmac_sha512(b"Bitcoin seed", bytes(seed))
        key = digest[:32]
        _check_secret(key)
        return cls(key=key, chain=digest[32:])

    def derive_child(self, index: int) -> ExtPriv:
        """Derive the child at ``index``; indices from 2**31 up are hardened."""
        if not 0 <= index <= _MAX_INDEX:
            raise ValueError(f"child index out of range: {index}")
        if index >= HARDENED_OFFSET:
            data = b"\x00" + self.key
        else:
            data = self.public_key()
        digest = _hmac_sha512(self.chain, data + index.to_bytes(4, "big"))

        tweak = int.from_bytes(digest[:32], "big")
        child = (tweak + int.from_bytes(self.key, "big")) % CURVE_ORDER
        if child == 0:
            raise ValueError("invalid child key")

        return ExtPriv(
            key=child.to_bytes(32, "big"),
            chain=digest[32:],
            depth=self.depth + 1,
            index=index,
            parent_fpr=self.fingerprint(),
        )

    def fingerprint(self) -> bytes:
        """First four bytes of HASH160 of this node's compressed public key."""
        sha = hashlib.sha256(self.public_key()).digest()
        return RIPEMD160.new(sha).digest()[:4]

    def public_key(self) -> bytes:
        """This node's compressed public key."""
        return compressed_public_key(self.key)