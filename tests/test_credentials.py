import dataclasses

import pytest

from solidauthz.credentials import (
    Agent,
    Client,
    Credentials,
    CredentialsError,
    HttpRequest,
    InvalidTokenError,
    Issuer,
    MissingTokenError,
    UnsupportedCredentialsError,
)


def test_header_lookup_is_case_insensitive():
    request = HttpRequest(headers={"Authorization": "Bearer token"})
    assert request.header("authorization") == "Bearer token"
    assert request.header("AUTHORIZATION") == "Bearer token"


def test_missing_header_gives_empty_string():
    request = HttpRequest(headers={"DPoP": "token"})
    assert request.header("Authorization") == ""


def test_request_keeps_method_and_path():
    request = HttpRequest(method="PUT", path="/foo/bar")
    assert request.method == "PUT"
    assert request.path == "/foo/bar"


def test_default_credentials_are_empty():
    creds = Credentials()
    assert creds.agent is None
    assert creds.client is None
    assert creds.issuer is None


def test_credentials_hold_their_parts():
    creds = Credentials(
        agent=Agent("http://user.example.com/#me"),
        client=Client("http://client.example.com/#me"),
        issuer=Issuer("https://example.org/issuer"),
    )
    assert creds.agent.web_id == "http://user.example.com/#me"
    assert creds.client.client_id == "http://client.example.com/#me"
    assert creds.issuer.url == "https://example.org/issuer"


def test_agent_is_immutable():
    agent = Agent("https://example.org/user")
    with pytest.raises(dataclasses.FrozenInstanceError):
        agent.web_id = "https://example.org/other"
    assert agent.web_id == "https://example.org/user"


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        (UnsupportedCredentialsError, "not implemented"),
        (InvalidTokenError, "invalid token"),
        (MissingTokenError, "missing token"),
    ],
)
def test_errors_have_default_messages(error_type, message):
    error = error_type()
    assert str(error) == message
    assert isinstance(error, CredentialsError)


def test_error_message_can_be_overridden():
    error = InvalidTokenError("invalid Bearer token format")
    assert str(error) == "invalid Bearer token format"
    assert isinstance(error, CredentialsError)