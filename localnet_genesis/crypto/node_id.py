"""Node identity derivation from TLS staking credentials."""

import hashlib

from Crypto.Hash import RIPEMD160
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from .formatting import cb58_encode, cb58_decode


NODE_ID_PREFIX = "NodeID-"
NODE_ID_LEN = 20

ALLOWED_RSA_KEY_BITS = (2048, 4096)
MAX_CERTIFICATE_LEN = 2048
ALLOWED_RSA_EXPONENT = 65537


def _public_key_der(public_key) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )


def _check_staking_public_key(public_key) -> None:
    """Only RSA and ECDSA P-256 keys are accepted as staking keys."""
    if isinstance(public_key, rsa.RSAPublicKey):
        numbers = public_key.public_numbers()
        if public_key.key_size not in ALLOWED_RSA_KEY_BITS:
            raise ValueError(f"unsupported RSA key size {public_key.key_size}")
        if numbers.e != ALLOWED_RSA_EXPONENT:
            raise ValueError(f"unsupported RSA public exponent {numbers.e}")
    elif isinstance(public_key, ec.EllipticCurvePublicKey):
        if not isinstance(public_key.curve, ec.SECP256R1):
            raise ValueError(f"unsupported elliptic curve {public_key.curve.name}")
    else:
        raise ValueError(f"unsupported staking key type {type(public_key).__name__}")


def node_id_from_cert_der(cert_der: bytes) -> bytes:
    """Compute the 20-byte short ID: RIPEMD-160 of SHA-256 of the certificate DER."""
    digest = hashlib.sha256(cert_der).digest()
    return RIPEMD160.new(digest).digest()


def format_node_id(short_id: bytes) -> str:
    """Render a 20-byte short ID as NodeID-<cb58>."""
    return NODE_ID_PREFIX + cb58_encode(short_id)


def parse_node_id(node_id: str) -> bytes:
    """
    Parse a NodeID-<cb58> string back to its 20 bytes.

    Raises:
        ValueError: If the prefix, checksum or length is wrong
    """
    if not node_id.startswith(NODE_ID_PREFIX):
        raise ValueError(f"node ID must start with {NODE_ID_PREFIX}")
    short_id = cb58_decode(node_id[len(NODE_ID_PREFIX):])
    if len(short_id) != NODE_ID_LEN:
        raise ValueError(f"node ID must be {NODE_ID_LEN} bytes, got {len(short_id)}")
    return short_id


def derive_node_id(staking_key: bytes, staking_cert: bytes) -> str:
    """
    Derive a node ID from a PEM staking key and certificate pair.

    Args:
        staking_key: PEM encoded private key
        staking_cert: PEM encoded X.509 certificate

    Returns:
        Node ID string (NodeID-...)

    Raises:
        ValueError: If either PEM is malformed, the key does not match
            the certificate, the key type is not allowed for staking
            or the certificate exceeds 2 KiB
    """
    try:
        cert = x509.load_pem_x509_certificate(staking_cert)
        private_key = serialization.load_pem_private_key(staking_key, password=None)
    except UnsupportedAlgorithm as e:
        raise ValueError(f"unsupported staking credentials: {e}") from e

    cert_public_key = cert.public_key()
    if _public_key_der(private_key.public_key()) != _public_key_der(cert_public_key):
        raise ValueError("private key does not match certificate public key")
    _check_staking_public_key(cert_public_key)

    cert_der = cert.public_bytes(serialization.Encoding.DER)
    if len(cert_der) > MAX_CERTIFICATE_LEN:
        raise ValueError(f"certificate is {len(cert_der)} bytes, limit is {MAX_CERTIFICATE_LEN}")
    return format_node_id(node_id_from_cert_der(cert_der))
