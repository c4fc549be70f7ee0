# seedaddr

Turn a BIP-39 seed phrase into native SegWit (P2WPKH, `bc1…` / `tb1…`)
Bitcoin addresses along the BIP-84 derivation path
`m/84'/coin'/account'/change/index`.

The phrase is checked against a wordlist first: it must have 12 or 24
words, every word must be on the list, and the checksum must match.
The seed is then stretched with PBKDF2-HMAC-SHA512 (2048 rounds, salt
`"mnemonic"` plus the optional passphrase), a BIP-32 master key is made
from it, and child keys are derived down the path. Each child's compressed
public key is hashed (SHA-256, then RIPEMD-160) and written out in Bech32.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The command needs the BIP-39 wordlist as a file with one word per line,
given with `--wordlist`:

```
seedaddr "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about" --wordlist english.txt
```

prints the hex seed and then one numbered address per line:

```
seed: 5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc19a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4
0: bc1qcr8te4kr609gcawutmrza0j4xv80jy8z306fyu
```

Options:

| Option          | Default   | Meaning                                                  |
|-----------------|-----------|----------------------------------------------------------|
| `--wordlist`    | required  | path of the newline-separated BIP-39 wordlist            |
| `--passphrase`  | empty     | optional BIP-39 passphrase mixed into the seed           |
| `--count`       | `1`       | how many consecutive addresses to print, from index 0    |
| `--network`     | `mainnet` | `testnet` selects coin type 1 and the `tb` prefix; any other value means mainnet (coin type 0, `bc`) |
| `--account`     | `0`       | hardened account number in the path                     |
| `--change-flag` | `0`       | `0` for receiving addresses, `1` for change addresses    |

`--count`, `--account` and `--change-flag` take integers from 0 to
4294967295.

Example: the first five testnet change addresses of account 2:

```
seedaddr "<your twelve or twenty-four words>" --wordlist english.txt --network testnet --account 2 --change-flag 1 --count 5
```

An unreadable wordlist or an invalid phrase (wrong word count, unknown
word, bad checksum) stops the command with an `Error: …` message on
standard error, nothing on standard output, and exit status 1.

## What it does not do

No wordlist ships with the package; you supply one. The package only reads
phrases and derives addresses: it does not generate new mnemonics, export
extended keys (xprv/xpub), produce other address types, or decode Bech32
strings.

## Library use

The building blocks are importable on their own:

- `seedaddr.bip39` — `load_wordlist(path)`,
  `mnemonic_to_entropy(mnemonic, wordlist)` (raises `MnemonicError`, a
  `ValueError`), `seed_from_mnemonic(mnemonic, passphrase="")`
- `seedaddr.bip32` — `ExtPriv` (a frozen dataclass with `key`, `chain`,
  `depth`, `index`, `parent_fpr`) with `new_master`, `derive_child`,
  `fingerprint` and `public_key`, plus `compressed_public_key`
- `seedaddr.bech32` — `encode`, which hashes its input (SHA-256 then
  RIPEMD-160) and writes a version-0 witness program, and the helpers
  `convert_bits`, `compute_checksum`, `expand_hrp`, `polymod`
- `seedaddr.address` — `p2wpkh(hrp, pubkey)`
- `seedaddr.cli` — `derive_addresses(seed, count, network, account, change_flag)`
  and `main`

```python
from seedaddr.address import p2wpkh

pubkey = bytes.fromhex(
    "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
)
print(p2wpkh("bc", pubkey))  # bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4
```

## A word of caution

A seed phrase controls real funds. Run this only on a machine you trust,
and keep in mind that phrases passed on the command line may end up in
your shell history.