"""Exceptions raised while assembling a genesis."""

from typing import Optional


class GenesisError(Exception):
    """Base class for genesis assembly failures."""


class EmbeddedGenesisError(GenesisError):
    """The embedded chain genesis could not be built or serialized."""


class SerializationError(GenesisError):
    """The final genesis document could not be serialized."""


class GenesisInputError(GenesisError):
    """Network ID, start time or parameters do not form a valid genesis."""


class NodeKeyError(GenesisError):
    """
    Failure tied to the key material of one node.

    Carries the zero-based position of the node in the input list so the
    caller can tell which key set is broken without seeing the key bytes.
    """

    step = "process node keys"

    def __init__(self, index: int, reason: str, node_id: Optional[str] = None):
        self.index = index
        self.node_id = node_id
        self.reason = reason
        where = f"node {index}" if node_id is None else f"node {index} ({node_id})"
        super().__init__(f"couldn't {self.step} for {where}: {reason}")


class NodeIDError(NodeKeyError):
    """Node ID could not be derived from the staking key and certificate."""
    step = "get node ID"


class BLSKeyError(NodeKeyError):
    """BLS secret key bytes are malformed."""
    step = "load BLS secret key"


class ProofOfPossessionError(NodeKeyError):
    """Proof of possession could not be generated."""
    step = "create proof of possession"


class HealthClientError(Exception):
    """Health API request failed."""
