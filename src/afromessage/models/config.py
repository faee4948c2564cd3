from pydantic import BaseModel, ConfigDict

DEFAULT_BASE_URL = "https://api.afromessage.com/api"


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    sender_name: str = ""
    identifier_id: str = ""
