"""Errors raised while parsing keys and generating tokens."""


class JWTGenError(Exception):
    """Base class for all token generation errors."""


class MissingPEMHeadersError(JWTGenError):
    """The PEM text lacks the BEGIN/END delimiter structure."""


class InvalidPrivateKeyError(JWTGenError):
    """The key body is not valid base64 or not a loadable RSA private key."""


class InvalidHeaderError(JWTGenError):
    """The header fields could not be serialized to JSON."""


class InvalidPayloadError(JWTGenError):
    """The payload could not be serialized to JSON."""


class InvalidSignatureError(JWTGenError):
    """The signing primitive rejected the key, algorithm or data."""


class InvalidHeaderOrPayloadError(JWTGenError):
    """The joined header and payload could not be converted to bytes."""
