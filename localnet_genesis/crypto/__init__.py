"""Key material and identity derivation for local network validators."""

from .keys import NodeKeys, generate_node_keys, load_node_keys
from .node_id import derive_node_id, parse_node_id
from .bls import ProofOfPossession, load_bls_secret_key, new_proof_of_possession, verify_proof_of_possession
from .formatting import hex_encode, hex_decode, cb58_encode, cb58_decode

__all__ = [
    "NodeKeys",
    "generate_node_keys",
    "load_node_keys",
    "derive_node_id",
    "parse_node_id",
    "ProofOfPossession",
    "load_bls_secret_key",
    "new_proof_of_possession",
    "verify_proof_of_possession",
    "hex_encode",
    "hex_decode",
    "cb58_encode",
    "cb58_decode",
]
