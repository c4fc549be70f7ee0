import pytest

from seedaddr.bip39 import seed_from_mnemonic
from seedaddr.cli import derive_addresses, main

MNEMONIC = " ".join(["abandon"] * 11 + ["about"])
FIRST_ADDRESS = "bc1qcr8te4kr609gcawutmrza0j4xv80jy8z306fyu"
SEED_HEX = (
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)


@pytest.fixture
def seed():
    return seed_from_mnemonic(MNEMONIC, "")


@pytest.fixture
def wordlist_path(tmp_path):
    words = ["abandon", "ability", "able", "about"]
    words += [f"filler{i}" for i in range(2048 - len(words))]
    path = tmp_path / "wordlist.txt"
    path.write_text("\n".join(words), encoding="utf-8")
    return path


def test_first_mainnet_address(seed):
    assert derive_addresses(seed, 1) == [FIRST_ADDRESS]


def test_count_and_prefix_consistency(seed):
    many = derive_addresses(seed, 4)
    assert len(many) == 4
    assert len(set(many)) == 4
    assert many[0] == FIRST_ADDRESS
    assert all(a.startswith("bc1") for a in many)


def test_testnet_uses_tb_prefix(seed):
    testnet = derive_addresses(seed, 2, "testnet")
    assert all(a.startswith("tb1") for a in testnet)
    assert testnet[0][3:] != FIRST_ADDRESS[3:]


def test_account_and_change_change_addresses(seed):
    base = derive_addresses(seed, 1)
    assert derive_addresses(seed, 1, account=1) != base
    assert derive_addresses(seed, 1, change_flag=1) != base


def test_zero_count(seed):
    assert derive_addresses(seed, 0) == []


def test_main_prints_seed_and_addresses(wordlist_path, capsys):
    status = main([MNEMONIC, "--wordlist", str(wordlist_path), "--count", "2"])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out[0] == f"seed: {SEED_HEX}"
    assert out[1] == f"0: {FIRST_ADDRESS}"
    assert out[2].startswith("1: bc1")
    assert len(out) == 3


def test_main_rejects_bad_checksum(wordlist_path, capsys):
    bad = " ".join(["abandon"] * 12)
    status = main([bad, "--wordlist", str(wordlist_path)])
    assert status == 1
    assert "checksum mismatch" in capsys.readouterr().err


def test_main_rejects_negative_count(wordlist_path):
    with pytest.raises(SystemExit) as info:
        main([MNEMONIC, "--wordlist", str(wordlist_path), "--count", "-1"])
    assert info.value.code == 2