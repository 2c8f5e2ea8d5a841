"""Per-node key material: generation and loading."""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from py_ecc.bls import G2ProofOfPossession as bls_pop

from .bls import secret_key_to_bytes


logger = logging.getLogger(__name__)

STAKING_KEY_FILE = "staker.key"
STAKING_CERT_FILE = "staker.crt"
SIGNER_KEY_FILE = "signer.key"

CERT_NOT_BEFORE = datetime(2000, 1, 1, tzinfo=timezone.utc)
CERT_NOT_AFTER = datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


@dataclass(frozen=True)
class NodeKeys:
    """Key material of one validator."""
    staking_key: bytes
    staking_cert: bytes
    bls_key: bytes

    def __repr__(self) -> str:
        # Never print key material
        return "NodeKeys(<redacted>)"


def generate_staking_cert_and_key() -> tuple[bytes, bytes]:
    """
    Generate a self-signed ECDSA P-256 staking certificate.

    Returns:
        Tuple of (PEM certificate, PEM PKCS8 private key)
    """
    private_key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([])
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(CERT_NOT_BEFORE)
        .not_valid_after(CERT_NOT_AFTER)
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(private_key, hashes.SHA256())
    )
    cert_pem = cert.public_bytes(serialization.Encoding.PEM)
    key_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )
    return cert_pem, key_pem


def generate_bls_key() -> bytes:
    """Generate a random 32-byte BLS secret key."""
    return secret_key_to_bytes(bls_pop.KeyGen(secrets.token_bytes(32)))


def generate_node_keys() -> NodeKeys:
    """
    Generate fresh key material for one local validator.

    Nothing is written to disk.

    Returns:
        NodeKeys: New staking certificate, staking key and BLS key
    """
    cert_pem, key_pem = generate_staking_cert_and_key()
    return NodeKeys(staking_key=key_pem, staking_cert=cert_pem, bls_key=generate_bls_key())


def load_node_keys(directory: str) -> NodeKeys:
    """
    Load node key material from a staking directory.

    Args:
        directory: Directory holding staker.key, staker.crt and signer.key

    Returns:
        NodeKeys read from the directory
    """
    base = Path(directory)
    keys = NodeKeys(
        staking_key=(base / STAKING_KEY_FILE).read_bytes(),
        staking_cert=(base / STAKING_CERT_FILE).read_bytes(),
        bls_key=(base / SIGNER_KEY_FILE).read_bytes(),
    )
    logger.debug(f"Loaded node keys from {base}")
    return keys
