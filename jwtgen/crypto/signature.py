"""RSASSA-PKCS1-v1_5 signatures over the token signing input."""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from jwtgen.crypto.errors import InvalidSignatureError
from jwtgen.crypto.keys import PrivateKey
from jwtgen.crypto.types import SigningAlgorithm

HASH_ALGORITHMS: dict[SigningAlgorithm, type[hashes.HashAlgorithm]] = {
    SigningAlgorithm.RS1: hashes.SHA1,
    SigningAlgorithm.RS224: hashes.SHA224,
    SigningAlgorithm.RS256: hashes.SHA256,
    SigningAlgorithm.RS384: hashes.SHA384,
    SigningAlgorithm.RS512: hashes.SHA512,
}


def hash_for(algorithm: SigningAlgorithm) -> hashes.HashAlgorithm:
    """Return a fresh hash instance for a signing algorithm."""
    return HASH_ALGORITHMS[algorithm]()


def create_signature(
    data: bytes, algorithm: SigningAlgorithm, key: PrivateKey
) -> bytes:
    """Sign ``data`` with PKCS#1 v1.5 padding and the algorithm's hash.

    ``data`` is the raw message; hashing is done by the RSA primitive.
    """
    try:
        return key.handle.sign(data, padding.PKCS1v15(), hash_for(algorithm))
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidSignatureError(
            f"could not sign with {algorithm.value}"
        ) from exc
