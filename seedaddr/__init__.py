"""Derive BIP-84 P2WPKH Bitcoin addresses from a BIP-39 seed phrase."""

__version__ = "0.1.0"

__all__ = ["address", "bech32", "bip32", "bip39", "cli"]