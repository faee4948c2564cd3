import pytest

from afromessage import AfroMessageSettings, ConfigurationError, SmsClient
from afromessage.models import DEFAULT_BASE_URL
from tests.conftest import make_response


@pytest.fixture
def afromessage_env(monkeypatch):
    monkeypatch.setenv("AFROMESSAGE_TOKEN", "env-token")
    monkeypatch.setenv("AFROMESSAGE_SENDER_NAMES", "ACME")
    monkeypatch.setenv("AFROMESSAGE_IDENTIFIER_ID", "ID1")


def test_settings_read_environment(afromessage_env):
    config = AfroMessageSettings(_env_file=None).to_client_config()

    assert config.api_key == "env-token"
    assert config.base_url == DEFAULT_BASE_URL
    assert config.sender_name == "ACME"
    assert config.identifier_id == "ID1"


def test_explicit_values_win_over_environment(afromessage_env):
    config = AfroMessageSettings(_env_file=None).to_client_config(
        api_key="explicit", sender_name=""
    )

    assert config.api_key == "explicit"
    assert config.sender_name == ""
    assert config.identifier_id == "ID1"


def test_from_env_builds_client(afromessage_env, session):
    session.post.return_value = make_response(body={"acknowledge": "success"})
    client = SmsClient.from_env(session=session)

    client.send_sms({"to": "+1", "message": "hi"})

    kwargs = session.post.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Bearer env-token"
    assert kwargs["json"]["sender"] == "ACME"
    assert kwargs["json"]["from"] == "ID1"


def test_from_env_without_token_fails(monkeypatch, session):
    monkeypatch.delenv("AFROMESSAGE_TOKEN", raising=False)

    with pytest.raises(ConfigurationError):
        SmsClient.from_env(session=session)


def test_base_url_is_not_read_from_environment(afromessage_env, monkeypatch):
    monkeypatch.setenv("AFROMESSAGE_BASE_URL", "https://elsewhere.example/api")

    config = AfroMessageSettings(_env_file=None).to_client_config(api_key="k")

    assert config.base_url == DEFAULT_BASE_URL


def test_base_url_can_be_passed_explicitly(afromessage_env, session):
    session.post.return_value = make_response(body={"acknowledge": "success"})
    client = SmsClient.from_env(session=session, base_url="https://sandbox.example/api")

    client.send_sms({"to": "+1", "message": "hi"})

    assert session.post.call_args.kwargs["url"] == "https://sandbox.example/api/send"
