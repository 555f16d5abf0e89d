"""Credentials, the request view the extractors read, and authentication errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol


@dataclass(frozen=True)
class Agent:
    """The agent making a request, identified by its WebID."""

    web_id: str


@dataclass(frozen=True)
class Client:
    """The client application making a request."""

    client_id: str


@dataclass(frozen=True)
class Issuer:
    """The issuer of a set of credentials."""

    url: str


@dataclass(frozen=True)
class Credentials:
    """Identifies the entity accessing or owning data."""

    agent: Agent | None = None
    client: Client | None = None
    issuer: Issuer | None = None


@dataclass
class HttpRequest:
    """The parts of an incoming HTTP request that authentication and authorization use."""

    method: str = "GET"
    path: str = "/"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> str:
        """Return the value of a header, matched case-insensitively, or an empty string."""
        wanted = name.lower()
        return next(
            (value for key, value in self.headers.items() if key.lower() == wanted),
            "",
        )


class CredentialsError(Exception):
    """Raised when credentials cannot be extracted from a request."""

    default_message = "credentials error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class UnsupportedCredentialsError(CredentialsError):
    """The request carries no credentials of the kind an extractor handles."""

    default_message = "not implemented"


class InvalidTokenError(CredentialsError):
    """The request carries a malformed or unacceptable token."""

    default_message = "invalid token"


class MissingTokenError(CredentialsError):
    """The request carries no token where one is required."""

    default_message = "missing token"


class CredentialsExtractor(Protocol):
    """Something that extracts credentials from an incoming request."""

    def extract(self, request: HttpRequest) -> Credentials | None:
        """Return the credentials found in the request, raising CredentialsError on failure."""
        ...