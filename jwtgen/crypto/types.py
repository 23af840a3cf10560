"""Type definitions for JWT headers and signing algorithms."""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SigningAlgorithm(StrEnum):
    """RSASSA-PKCS1-v1_5 variants, named by their JOSE ``alg`` code."""

    RS1 = "RS1"
    RS224 = "RS224"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"


class JWTHeader(BaseModel):
    """JOSE header of a token.

    ``alg`` and ``typ`` are always derived from ``algorithm`` and ``type``;
    entries for those names in ``extra`` are ignored when encoding.
    """

    model_config = ConfigDict(frozen=True)

    type: str = "JWT"
    algorithm: SigningAlgorithm
    extra: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("extra")
    @classmethod
    def _freeze_extra(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        """Copy ``extra`` into a read-only view."""
        return MappingProxyType(dict(value))
