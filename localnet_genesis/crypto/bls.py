"""BLS12-381 secret keys and proofs of possession."""

from dataclasses import dataclass

from py_ecc.bls import G2ProofOfPossession as bls_pop
from py_ecc.optimized_bls12_381 import curve_order

from .formatting import hex_encode


SECRET_KEY_LEN = 32
PUBLIC_KEY_LEN = 48
SIGNATURE_LEN = 96

# Domain separation tag of G2ProofOfPossession.PopProve
PROOF_OF_POSSESSION_DST = b"BLS_POP_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"


@dataclass(frozen=True)
class ProofOfPossession:
    """Compressed BLS public key and the proof that its owner holds the secret key."""
    public_key: bytes
    proof_of_possession: bytes

    @property
    def public_key_hex(self) -> str:
        """Get 0x-prefixed hex public key."""
        return hex_encode(self.public_key)

    @property
    def proof_of_possession_hex(self) -> str:
        """Get 0x-prefixed hex proof of possession."""
        return hex_encode(self.proof_of_possession)


def load_bls_secret_key(data: bytes) -> int:
    """
    Load a BLS secret key from its 32-byte big-endian serialization.

    Args:
        data: Raw secret key bytes

    Returns:
        Secret key scalar

    Raises:
        ValueError: If the bytes do not encode a valid secret key
    """
    if len(data) != SECRET_KEY_LEN:
        raise ValueError(f"expected {SECRET_KEY_LEN} bytes, got {len(data)}")
    secret_key = int.from_bytes(data, 'big')
    if not 0 < secret_key < curve_order:
        raise ValueError("secret key out of range")
    return secret_key


def secret_key_to_bytes(secret_key: int) -> bytes:
    """Serialize a secret key scalar to 32 big-endian bytes."""
    return secret_key.to_bytes(SECRET_KEY_LEN, 'big')


def new_proof_of_possession(secret_key: int) -> ProofOfPossession:
    """
    Derive the public key and proof of possession for a secret key.

    The proof is a signature over the compressed public key under the
    proof-of-possession ciphersuite.

    Args:
        secret_key: BLS secret key scalar

    Returns:
        ProofOfPossession with 48-byte public key and 96-byte proof
    """
    public_key = bytes(bls_pop.SkToPk(secret_key))
    proof = bytes(bls_pop.PopProve(secret_key))
    if len(public_key) != PUBLIC_KEY_LEN or len(proof) != SIGNATURE_LEN:
        raise ValueError("unexpected BLS output length")
    return ProofOfPossession(public_key=public_key, proof_of_possession=proof)


def verify_proof_of_possession(public_key: bytes, proof: bytes) -> bool:
    """
    Verify a proof of possession against its public key.

    Returns:
        True if the proof is valid, False otherwise
    """
    try:
        return bool(bls_pop.PopVerify(public_key, proof))
    except (ValueError, AssertionError):
        return False
