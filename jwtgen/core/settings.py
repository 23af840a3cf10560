"""Generator settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from jwtgen.crypto.types import SigningAlgorithm


class GeneratorSettings(BaseSettings):
    """Signing key and default header settings."""

    model_config = SettingsConfigDict(env_prefix="JWTGEN_")

    private_key_pem: str = ""
    algorithm: SigningAlgorithm = SigningAlgorithm.RS256
    token_type: str = "JWT"
    kid: str = ""
