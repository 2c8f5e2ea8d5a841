"""Tests for genesis assembly."""

import json
from dataclasses import replace

import pytest

from localnet_genesis.config import (
    CCHAIN_FUNDED_ADDRESS,
    CCHAIN_FUNDED_BALANCE,
    CCHAIN_GAS_LIMIT,
    GENESIS_LOCKTIME_STARTTIME_DELTA,
    INITIALLY_ACTIVE_TIME,
    STAKING_ADDRESS,
    WALLET_ADDRESS,
    GenesisParams,
)
from localnet_genesis.crypto import derive_node_id, hex_decode, verify_proof_of_possession
from localnet_genesis.errors import BLSKeyError, GenesisError, GenesisInputError, NodeIDError
from localnet_genesis.genesis import assemble_genesis, assembler, build_embedded_genesis


START_TIME = 1700000000
NETWORK_ID = 1337


def _node_ids(keys_list):
    return [derive_node_id(k.staking_key, k.staking_cert) for k in keys_list]


def test_top_level_layout(genesis_data, genesis_bytes):
    """Test top-level fields and formatting."""
    assert list(genesis_data) == [
        "allocations",
        "cChainGenesis",
        "initialStakeDuration",
        "initialStakeDurationOffset",
        "initialStakedFunds",
        "initialStakers",
        "message",
        "networkID",
        "startTime",
    ]
    assert genesis_data["networkID"] == NETWORK_ID
    assert genesis_data["startTime"] == START_TIME
    assert genesis_data["initialStakeDuration"] == 31536000
    assert genesis_data["initialStakeDurationOffset"] == 5400
    assert genesis_data["initialStakedFunds"] == [STAKING_ADDRESS]
    assert genesis_data["message"] == "{{ fun_quote }}"

    # Single space indentation
    assert genesis_bytes.startswith(b'{\n "allocations": [\n  {\n   "avaxAddr"')


def test_deterministic_for_fixed_clock(node_keys, genesis_bytes):
    """Test byte-identical output for identical inputs and start time."""
    assert assemble_genesis(NETWORK_ID, node_keys, start_time=START_TIME) == genesis_bytes


def test_stakers_follow_input_order(node_keys, genesis_data):
    """Test validator order and entry shape."""
    stakers = genesis_data["initialStakers"]
    assert [s["nodeID"] for s in stakers] == _node_ids(node_keys)

    for staker in stakers:
        assert staker["delegationFee"] == 1000000
        assert staker["rewardAddress"] == WALLET_ADDRESS
        assert set(staker["signer"]) == {"proofOfPossession", "publicKey"}
        assert staker["signer"]["publicKey"].startswith("0x")
        assert len(hex_decode(staker["signer"]["publicKey"])) == 48
        assert len(hex_decode(staker["signer"]["proofOfPossession"])) == 96


def test_duplicate_keys_are_kept(node_keys):
    """Test that duplicate key material yields duplicate entries."""
    keys = [node_keys[1], node_keys[0], node_keys[1]]
    data = json.loads(assemble_genesis(NETWORK_ID, keys, start_time=START_TIME))

    node_ids = [s["nodeID"] for s in data["initialStakers"]]
    assert node_ids == _node_ids(keys)
    assert node_ids[0] == node_ids[2]
    assert data["initialStakers"][0] == data["initialStakers"][2]


def test_empty_validator_set():
    """Test that no keys still yields a complete genesis."""
    data = json.loads(assemble_genesis(NETWORK_ID, [], start_time=START_TIME))

    assert data["initialStakers"] == []
    assert len(data["allocations"]) == 2
    assert data["initialStakedFunds"] == [STAKING_ADDRESS]
    assert json.loads(data["cChainGenesis"])["alloc"]


def test_lock_times_match_start_time(genesis_data):
    """Test every locked tranche unlocks at start time plus the fixed delta."""
    expected = genesis_data["startTime"] + GENESIS_LOCKTIME_STARTTIME_DELTA
    assert expected == START_TIME + 2836800

    locked = [
        tranche
        for alloc in genesis_data["allocations"]
        for tranche in alloc["unlockSchedule"]
        if "locktime" in tranche
    ]
    assert len(locked) == 2
    assert all(t["locktime"] == expected for t in locked)


def test_allocation_balances(genesis_data):
    """Test allocation amounts and totals."""
    wallet, staking = genesis_data["allocations"]

    assert wallet["avaxAddr"] == WALLET_ADDRESS
    assert wallet["ethAddr"] == "0xb3d82b1367d362de99ab59a658165aff520cbd4d"
    assert wallet["initialAmount"] == 300000000000000000
    assert [t["amount"] for t in wallet["unlockSchedule"]] == [20000000000000000, 10000000000000000]
    assert "locktime" not in wallet["unlockSchedule"][0]
    total = wallet["initialAmount"] + sum(t["amount"] for t in wallet["unlockSchedule"])
    assert total == 330000000000000000

    assert staking["avaxAddr"] == STAKING_ADDRESS
    assert staking["initialAmount"] == 0
    total = staking["initialAmount"] + sum(t["amount"] for t in staking["unlockSchedule"])
    assert total == 10000000000000000


def test_proofs_of_possession_verify(genesis_data):
    """Test every staker's proof verifies against its own public key."""
    for staker in genesis_data["initialStakers"]:
        signer = staker["signer"]
        assert verify_proof_of_possession(
            hex_decode(signer["publicKey"]),
            hex_decode(signer["proofOfPossession"])
        )


def test_embedded_chain_shape(genesis_data):
    """Test the double-encoded embedded chain genesis."""
    assert isinstance(genesis_data["cChainGenesis"], str)
    assert genesis_data["cChainGenesis"].encode('utf-8') == build_embedded_genesis()

    cchain = json.loads(genesis_data["cChainGenesis"])
    assert cchain["alloc"] == {CCHAIN_FUNDED_ADDRESS: {"balance": CCHAIN_FUNDED_BALANCE}}
    assert cchain["difficulty"] == "0x0"
    assert cchain["gasLimit"] == CCHAIN_GAS_LIMIT
    assert cchain["timestamp"] == INITIALLY_ACTIVE_TIME
    assert cchain["config"]["chainId"] == 43112
    assert cchain["config"]["durangoTimestamp"] == INITIALLY_ACTIVE_TIME
    assert cchain["config"]["etnaTimestamp"] == INITIALLY_ACTIVE_TIME


def test_malformed_cert_aborts_assembly(node_keys):
    """Test that one bad staking certificate fails the whole call."""
    keys = [node_keys[0], replace(node_keys[1], staking_cert=b"garbage"), node_keys[2]]

    with pytest.raises(NodeIDError) as exc_info:
        assemble_genesis(NETWORK_ID, keys, start_time=START_TIME)

    assert exc_info.value.index == 1
    assert "couldn't get node ID for node 1" in str(exc_info.value)
    assert isinstance(exc_info.value, GenesisError)


def test_malformed_bls_key_aborts_assembly(node_keys):
    """Test that a bad BLS key is reported with its node."""
    keys = [node_keys[0], replace(node_keys[2], bls_key=b"\x00" * 32)]

    with pytest.raises(BLSKeyError) as exc_info:
        assemble_genesis(NETWORK_ID, keys, start_time=START_TIME)

    err = exc_info.value
    assert err.index == 1
    assert err.node_id == derive_node_id(node_keys[2].staking_key, node_keys[2].staking_cert)
    assert node_keys[2].bls_key.hex() not in str(err)


def test_wall_clock_read_once(monkeypatch):
    """Test that the clock is read once and reused for all lock times."""
    class FakeClock:
        calls = 0

        @classmethod
        def time(cls):
            cls.calls += 1
            return 1000 * cls.calls

    monkeypatch.setattr(assembler, "time", FakeClock)

    data = json.loads(assemble_genesis(NETWORK_ID, []))

    assert FakeClock.calls == 1
    assert data["startTime"] == 1000
    for alloc in data["allocations"]:
        for tranche in alloc["unlockSchedule"]:
            if "locktime" in tranche:
                assert tranche["locktime"] == 1000 + GENESIS_LOCKTIME_STARTTIME_DELTA


def test_custom_params():
    """Test overriding genesis parameters."""
    params = GenesisParams(message="hello", locktime_delta=10)
    data = json.loads(assemble_genesis(7, [], params=params, start_time=100))

    assert data["message"] == "hello"
    assert data["networkID"] == 7
    assert data["allocations"][1]["unlockSchedule"][0]["locktime"] == 110


def test_network_id_must_be_uint32():
    """Test network ID range and type checks."""
    for network_id in (-1, 2**32, 2**40, "7", True):
        with pytest.raises(GenesisInputError):
            assemble_genesis(network_id, [], start_time=START_TIME)

    data = json.loads(assemble_genesis(2**32 - 1, [], start_time=START_TIME))
    assert data["networkID"] == 2**32 - 1


def test_invalid_start_time_is_wrapped():
    """Test that a bad start time surfaces as a genesis error."""
    for start_time in ("abc", -5, 1.5):
        with pytest.raises(GenesisInputError):
            assemble_genesis(NETWORK_ID, [], start_time=start_time)
