"""Unpadded base64url encoding (RFC 7515, section 2)."""

import base64


def base64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without ``=`` padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
