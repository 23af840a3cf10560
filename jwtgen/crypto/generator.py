"""Signed JWT assembly."""

import logging
from typing import Any

from jwtgen.core.settings import GeneratorSettings
from jwtgen.crypto.encoder import encode_header, encode_payload, encode_signature
from jwtgen.crypto.errors import InvalidHeaderOrPayloadError
from jwtgen.crypto.keys import PrivateKey, parse_private_key
from jwtgen.crypto.signature import create_signature
from jwtgen.crypto.types import JWTHeader, SigningAlgorithm

logger = logging.getLogger(__name__)


def generate_jwt(header: JWTHeader, payload: Any, private_key: PrivateKey) -> str:
    """Build a compact ``header.payload.signature`` token.

    Header and payload are encoded first; their joined text is signed with
    ``header.algorithm``. Any failure raises before a token is produced.
    """
    encoded_header = encode_header(header)
    encoded_payload = encode_payload(payload)

    try:
        signing_input = f"{encoded_header}.{encoded_payload}".encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidHeaderOrPayloadError(
            "encoded header and payload are not valid text"
        ) from exc

    signature = create_signature(signing_input, header.algorithm, private_key)
    encoded_signature = encode_signature(signature)

    logger.debug("Generated %s token", header.algorithm.value)
    return f"{encoded_header}.{encoded_payload}.{encoded_signature}"


class JWTGenerator:
    """Signs tokens with one private key and fixed header defaults."""

    def __init__(
        self,
        private_key_pem: str,
        algorithm: SigningAlgorithm = SigningAlgorithm.RS256,
        token_type: str = "JWT",
        kid: str | None = None,
    ) -> None:
        self._private_key = parse_private_key(private_key_pem)
        self._algorithm = algorithm
        self._token_type = token_type
        self._kid = kid or None

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "JWTGenerator":
        """Create a generator from ``JWTGEN_*`` settings."""
        return cls(
            private_key_pem=settings.private_key_pem,
            algorithm=settings.algorithm,
            token_type=settings.token_type,
            kid=settings.kid,
        )

    @property
    def algorithm(self) -> SigningAlgorithm:
        """Algorithm every token is signed with."""
        return self._algorithm

    @property
    def kid(self) -> str | None:
        """Key id placed in the header, or ``None`` when omitted."""
        return self._kid

    def create_token(
        self, payload: Any, extra: dict[str, str] | None = None
    ) -> str:
        """Sign ``payload``; ``extra`` header fields override ``kid``."""
        fields: dict[str, str] = {}
        if self._kid is not None:
            fields["kid"] = self._kid
        if extra:
            fields.update(extra)
        header = JWTHeader(
            type=self._token_type, algorithm=self._algorithm, extra=fields
        )
        return generate_jwt(header, payload, self._private_key)
