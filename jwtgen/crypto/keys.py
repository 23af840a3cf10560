"""RSA private key parsing from PEM text."""

import base64
import binascii
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel, ConfigDict

from jwtgen.crypto.errors import InvalidPrivateKeyError, MissingPEMHeadersError

logger = logging.getLogger(__name__)

PEM_DELIMITER = "-----"
PEM_MIN_PARTS = 5
PEM_BODY_INDEX = 2
PEM_WHITESPACE = " \t\n\r"

# Offset of the inner RSAPrivateKey SEQUENCE in a PKCS#8 wrapped 1024-4096 bit
# key: outer SEQUENCE (4) + version (3) + AlgorithmIdentifier (15) + OCTET
# STRING header (4).
DER_PREFIX_LENGTH = 26
ASN1_SEQUENCE_TAG = 0x30


class PrivateKey(BaseModel):
    """Parsed RSA private key used to sign tokens."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    handle: rsa.RSAPrivateKey

    @property
    def key_size(self) -> int:
        """Modulus size in bits."""
        return self.handle.key_size

    @classmethod
    def from_pem(cls, pem: str) -> "PrivateKey":
        """Parse a PEM-encoded RSA private key."""
        return parse_private_key(pem)


def strip_pem(pem: str) -> bytes:
    """Remove PEM armour and whitespace, returning the DER key bytes.

    When byte 26 of the decoded body is an ASN.1 SEQUENCE tag the first 26
    bytes are treated as a PKCS#8 wrapper and dropped. This is a fixed-offset
    check rather than an ASN.1 parse: a PKCS#1 key whose modulus happens to
    carry ``0x30`` at that offset is trimmed as well and fails to load.
    """
    stripped = "".join(ch for ch in pem if ch not in PEM_WHITESPACE)
    parts = stripped.split(PEM_DELIMITER)
    if len(parts) < PEM_MIN_PARTS:
        raise MissingPEMHeadersError("PEM text is missing BEGIN/END headers")

    try:
        der = base64.b64decode(parts[PEM_BODY_INDEX], validate=True)
    except binascii.Error as exc:
        raise InvalidPrivateKeyError("PEM body is not valid base64") from exc

    if len(der) > DER_PREFIX_LENGTH and der[DER_PREFIX_LENGTH] == ASN1_SEQUENCE_TAG:
        logger.debug("Dropping %d byte DER prefix", DER_PREFIX_LENGTH)
        return der[DER_PREFIX_LENGTH:]
    return der


def parse_private_key(pem: str) -> PrivateKey:
    """Parse PEM text into a ``PrivateKey``.

    Raises ``MissingPEMHeadersError`` for malformed armour and
    ``InvalidPrivateKeyError`` when the body cannot be loaded as an RSA key.
    """
    der = strip_pem(pem)
    try:
        loaded = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidPrivateKeyError("DER data is not a valid private key") from exc

    if not isinstance(loaded, rsa.RSAPrivateKey):
        raise InvalidPrivateKeyError(
            f"expected an RSA private key, got {type(loaded).__name__}"
        )

    logger.debug("Loaded %d-bit RSA private key", loaded.key_size)
    return PrivateKey(handle=loaded)
