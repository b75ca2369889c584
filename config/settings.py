from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.constants import DEFAULT_NETWORK, DEFAULT_RPC_TIMEOUT


class Settings(BaseSettings):
    """
    Runtime settings, read from the environment and an optional .env file.
    """

    network: str = Field(
        default=DEFAULT_NETWORK,
        validation_alias="MOLTDAO_NETWORK",
        description="Named network to use (see constants/networks.py)",
    )
    private_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias="MOLTDAO_PRIVATE_KEY",
        description="Hex private key of the signing wallet. Only needed for votes, donations and proposals.",
    )
    rpc_url: Optional[str] = Field(
        default=None,
        validation_alias="MOLTDAO_RPC_URL",
        description="Overrides the network's default JSON-RPC endpoint",
    )
    rpc_timeout: int = Field(default=DEFAULT_RPC_TIMEOUT, gt=0, validation_alias="RPC_TIMEOUT")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("private_key", "rpc_url", mode="before")
    @classmethod
    def _blank_as_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def private_key_value(self) -> Optional[str]:
        return self.private_key.get_secret_value() if self.private_key else None


# Singleton instance
settings = Settings()
