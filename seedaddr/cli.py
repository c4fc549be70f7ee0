"""Command line: derive BIP-84 native SegWit addresses from a BIP-39 mnemonic."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from seedaddr import address, bip39
from seedaddr.bip32 import HARDENED_OFFSET, ExtPriv

_PURPOSE = 84


def derive_addresses(
    seed: bytes,
    count: int = 1,
    network: str = "mainnet",
    account: int = 0,
    change_flag: int = 0,
) -> list[str]:
    """Return the first ``count`` addresses on path m/84'/coin'/account'/change/i."""
    coin = 1 if network == "testnet" else 0
    hrp = "bc" if coin == 0 else "tb"

    node = ExtPriv.new_master(seed)
    for index in (_PURPOSE, coin, account):
        node = node.derive_child(index + HARDENED_OFFSET)

    branch = node.derive_child(change_flag)
    return [
        address.p2wpkh(hrp, branch.derive_child(i).public_key()) for i in range(count)
    ]


def _u32(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 0xFFFF_FFFF:
        raise argparse.ArgumentTypeError(f"{text} is not in 0..4294967295")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedaddr",
        description="Print the seed and P2WPKH addresses for a BIP-39 mnemonic.",
    )
    parser.add_argument("mnemonic", help="12 or 24 word BIP-39 mnemonic")
    parser.add_argument(
        "--wordlist", required=True, help="newline-separated BIP-39 wordlist file"
    )
    parser.add_argument("--passphrase", default="")
    parser.add_argument("--count", type=_u32, default=1)
    parser.add_argument("--network", default="mainnet")
    parser.add_argument("--account", type=_u32, default=0)
    parser.add_argument("--change-flag", dest="change_flag", type=_u32, default=0)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        wordlist = bip39.load_wordlist(args.wordlist)
        bip39.mnemonic_to_entropy(args.mnemonic, wordlist)
        seed = bip39.seed_from_mnemonic(args.mnemonic, args.passphrase)
        print(f"seed: {seed.hex()}")
        addresses = derive_addresses(
            seed, args.count, args.network, args.account, args.change_flag
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for i, addr in enumerate(addresses):
        print(f"{i}: {addr}")
    return 0


if __name__ == "__main__":
    sys.exit(main())