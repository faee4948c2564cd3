import json
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from afromessage import ClientConfig, SmsClient

BASE_URL = "https://api.afromessage.com/api"


def make_response(
    status_code: int = 200, body: Any = None, text: str | None = None
) -> requests.Response:
    res = requests.Response()
    res.status_code = status_code
    res.url = BASE_URL
    res.encoding = "utf-8"
    res._content = (text if text is not None else json.dumps(body)).encode("utf-8")
    return res


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    return SmsClient(ClientConfig(api_key="secret", base_url=BASE_URL), session=session)


@pytest.fixture
def client_with_defaults(session):
    config = ClientConfig(
        api_key="secret", base_url=BASE_URL, sender_name="ACME", identifier_id="ID1"
    )
    return SmsClient(config, session=session)
