[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seedaddr"
version = "0.1.0"
description = "Derive BIP-84 native SegWit (P2WPKH) Bitcoin addresses from a BIP-39 seed phrase"
requires-python = ">=3.10"
keywords = [
    "bitcoin",
    "bip39",
    "bip32",
    "bip84",
    "bech32",
    "mnemonic",
    "segwit",
    "hd-wallet",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seedaddr = "seedaddr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seedaddr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
