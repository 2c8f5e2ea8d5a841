"""Shared fixtures. BLS operations are slow in pure Python, so keys and
the assembled genesis are built once per session."""

import json

import pytest

from localnet_genesis.crypto import generate_node_keys
from localnet_genesis.genesis import assemble_genesis


START_TIME = 1700000000
NETWORK_ID = 1337


@pytest.fixture(scope="session")
def node_keys():
    """Key material for three validators."""
    return [generate_node_keys() for _ in range(3)]


@pytest.fixture(scope="session")
def genesis_bytes(node_keys):
    """Genesis assembled from the session keys at a fixed start time."""
    return assemble_genesis(NETWORK_ID, node_keys, start_time=START_TIME)


@pytest.fixture
def genesis_data(genesis_bytes):
    """Parsed top-level genesis JSON."""
    return json.loads(genesis_bytes)
