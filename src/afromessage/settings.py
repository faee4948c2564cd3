from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from afromessage.models.config import DEFAULT_BASE_URL, ClientConfig


class AfroMessageSettings(BaseSettings):
    """Reads ``AFROMESSAGE_*`` variables from the environment or a ``.env`` file.

    Only the credentials and sender defaults come from the environment; the
    base URL is always passed explicitly or left at the production endpoint.
    """

    model_config = SettingsConfigDict(
        env_prefix="AFROMESSAGE_", env_file=".env", extra="ignore"
    )

    token: str = Field(default="")
    sender_names: str = Field(default="")
    identifier_id: str = Field(default="")

    def to_client_config(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        sender_name: str | None = None,
        identifier_id: str | None = None,
    ) -> ClientConfig:
        return ClientConfig(
            api_key=self.token if api_key is None else api_key,
            base_url=base_url,
            sender_name=self.sender_names if sender_name is None else sender_name,
            identifier_id=self.identifier_id
            if identifier_id is None
            else identifier_id,
        )
