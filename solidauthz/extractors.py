"""Credentials extractors for the supported authorization schemes."""

from __future__ import annotations

import re
from typing import Protocol

from .credentials import (
    Agent,
    Credentials,
    CredentialsError,
    CredentialsExtractor,
    HttpRequest,
    InvalidTokenError,
    MissingTokenError,
    UnsupportedCredentialsError,
)

PUBLIC_WEB_ID = "https://example.org/public"

_WEB_ID_HEADER = re.compile(r"WebID\s+(.*)")


class TargetExtractor(Protocol):
    """Something that determines the original URL a request targeted."""

    def extract(self, request: HttpRequest) -> str:
        """Return the original target URL of the request."""
        ...


def _scheme_value(authorization: str, scheme: str) -> str | None:
    """Return the value of an ``<scheme> <value>`` header, or None if it has another shape."""
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != scheme.lower():
        return None
    return parts[1]


class BearerWebIdExtractor:
    """Takes the WebID from a Bearer Authorization header; the token is used as the WebID."""

    def extract(self, request: HttpRequest) -> Credentials:
        auth = request.header("Authorization")
        if not auth:
            raise MissingTokenError("no Bearer Authorization header specified")
        web_id = _scheme_value(auth, scheme="Bearer")
        if web_id is None:
            raise InvalidTokenError("invalid Bearer token format")
        return Credentials(agent=Agent(web_id))


class DPoPWebIdExtractor:
    """Takes the WebID from a DPoP-bound Authorization header; the token is used as the WebID."""

    def __init__(self, original_url_extractor: TargetExtractor) -> None:
        self._original_url_extractor = original_url_extractor

    def extract(self, request: HttpRequest) -> Credentials:
        auth = request.header("Authorization")
        if not auth:
            raise MissingTokenError("no DPoP-bound Authorization header specified")
        web_id = _scheme_value(auth, scheme="DPoP")
        if web_id is None:
            raise InvalidTokenError("invalid DPoP token format")
        if not request.header("DPoP"):
            raise MissingTokenError("no DPoP header specified")
        try:
            self._original_url_extractor.extract(request)
        except Exception as exc:
            raise CredentialsError(f"failed to extract original URL: {exc}") from exc
        return Credentials(agent=Agent(web_id))


class PublicCredentialsExtractor:
    """Always yields the public agent."""

    def extract(self, request: HttpRequest) -> Credentials:
        return Credentials(agent=Agent(PUBLIC_WEB_ID))


class UnionCredentialsExtractor:
    """Combines the credentials of several extractors; later results win.

    Extractors that fail are skipped; if every extractor fails, the failure is raised.
    """

    def __init__(self, *extractors: CredentialsExtractor) -> None:
        self._extractors = list(extractors)

    def extract(self, request: HttpRequest) -> Credentials:
        agent = client = issuer = None
        errors: list[CredentialsError] = []
        for extractor in self._extractors:
            try:
                creds = extractor.extract(request)
            except CredentialsError as exc:
                errors.append(exc)
                continue
            if creds is None:
                continue
            agent = creds.agent or agent
            client = creds.client or client
            issuer = creds.issuer or issuer
        if errors and len(errors) == len(self._extractors):
            raise CredentialsError("; ".join(str(e) for e in errors)) from errors[-1]
        return Credentials(agent=agent, client=client, issuer=issuer)


class UnsecureConstantCredentialsExtractor:
    """Always yields the same agent, whatever the request."""

    def __init__(self, web_id: str) -> None:
        self._credentials = Credentials(agent=Agent(web_id))

    def extract(self, request: HttpRequest) -> Credentials:
        return self._credentials


class UnsecureWebIdExtractor:
    """Trusts a WebID given directly in an ``Authorization: WebID <id>`` header."""

    def extract(self, request: HttpRequest) -> Credentials:
        auth = request.header("Authorization")
        if not auth.startswith("WebID "):
            raise UnsupportedCredentialsError()
        match = _WEB_ID_HEADER.fullmatch(auth)
        if match is None:
            raise UnsupportedCredentialsError()
        return Credentials(agent=Agent(match.group(1)))