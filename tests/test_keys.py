# MIT License
# Copyright (c) 2025 Hashborn

"""
Key derivation and account id tests.
"""

import pytest
from protocol.crypto.keys import derive_public_key, derivation_path, keypair_from_seed
from protocol.crypto.addresses import (
    to_account_id, account_id_from_seed, account_id_from_hex, ss58_address, account_id_from_ss58,
)
from protocol.config.params import NETWORKS, PC1_ROOT_KEY, MAINNET_SS58_FORMAT
from protocol.types.common import DerivationError

ALICE_HEX = "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"
BOB_HEX = "8eaf04151687736326c9fea17e25fc5287613693c912909cb226aa4794f26a48"
ALICE_SS58 = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
BOB_SS58 = "5FHneW46xGXgs5mUiveU4sbTyGBzmstUspZC92UhjJM694ty"


def test_well_known_dev_accounts():
    assert derive_public_key("Alice").hex() == ALICE_HEX
    assert derive_public_key("Bob").hex() == BOB_HEX
    assert ss58_address(account_id_from_seed("Alice")) == ALICE_SS58
    assert ss58_address(account_id_from_seed("Bob")) == BOB_SS58


def test_derivation_is_deterministic():
    for seed in ["Alice", "Alice//stash", "Ferdie//stash", "Charlie"]:
        assert account_id_from_seed(seed) == account_id_from_seed(seed)
        assert len(account_id_from_seed(seed)) == 32


def test_preset_seeds_are_distinct():
    seeds = set()
    for profile in NETWORKS.values():
        seeds.update(profile.endowed_seeds)
        if profile.root_seed:
            seeds.add(profile.root_seed)

    accounts = {account_id_from_seed(s) for s in seeds}
    assert len(accounts) == len(seeds)
    # Hard-coded root must not collide with any derived account
    assert account_id_from_hex(PC1_ROOT_KEY) not in accounts


def test_stash_differs_from_parent():
    assert account_id_from_seed("Alice//stash") != account_id_from_seed("Alice")
    assert account_id_from_seed("Bob//stash") != account_id_from_seed("Alice//stash")


def test_derivation_path():
    assert derivation_path("Alice") == "//Alice"
    assert derivation_path("Alice//stash") == "//Alice//stash"
    assert derivation_path("Alice/soft") == "//Alice/soft"


@pytest.mark.parametrize("seed", ["", "Alice/", "Alice///password", "/"])
def test_malformed_seed_is_fatal(seed):
    with pytest.raises(DerivationError):
        derive_public_key(seed)


def test_keypair_matches_public_key():
    kp = keypair_from_seed("Alice")
    assert kp.public_key == derive_public_key("Alice")


def test_account_id_requires_32_bytes():
    assert to_account_id(b"\x01" * 32) == b"\x01" * 32
    with pytest.raises(ValueError):
        to_account_id(b"\x01" * 33)
    with pytest.raises(ValueError):
        to_account_id(b"")


def test_account_id_from_hex():
    root = account_id_from_hex(PC1_ROOT_KEY)
    assert root.hex() == PC1_ROOT_KEY[2:]
    assert account_id_from_hex(PC1_ROOT_KEY[2:]) == root

    with pytest.raises(ValueError):
        account_id_from_hex("0x1234")
    with pytest.raises(ValueError):
        account_id_from_hex("0x" + "zz" * 32)


def test_ss58_roundtrip_any_format():
    alice = account_id_from_seed("Alice")
    addr = ss58_address(alice, MAINNET_SS58_FORMAT)
    assert addr != ALICE_SS58
    assert account_id_from_ss58(addr) == alice
    assert account_id_from_ss58(ALICE_SS58) == alice


def test_password_paths_are_unsupported():
    with pytest.raises(DerivationError, match="Password-protected"):
        derivation_path("Alice///secret")
