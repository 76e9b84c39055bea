"""Credentials and the password-grant token exchange.

Rooster Teeth uses a two-step authentication:
1. POST the username and password to the OAuth token endpoint
2. Receive a Bearer token to send on every API request
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from roosterteeth.api import AuthenticationError, RoosterTeethConnectionError, RoosterTeethError
from roosterteeth.models import AccessToken, decode

logger = logging.getLogger(__name__)

AUTH_URL = "https://auth.roosterteeth.com/oauth/token"

# Public client id of the Rooster Teeth web player
CLIENT_ID = "4338d2b4bdc8db1239360f28e72f0d9ddb1fd01e7a38fbb07b4b1f4ba4564cc5"

SCOPE = "user public"


@dataclass(frozen=True)
class Anonymous:
    """No credentials. Only public content is playable."""


@dataclass(frozen=True)
class Login:
    """Username/password credentials, exchanged for a token once."""

    username: str
    password: str = field(repr=False)


Credential = Anonymous | Login


def request_token(
    http: httpx.Client,
    login: Login,
    auth_url: str = AUTH_URL,
    client_id: str = CLIENT_ID,
) -> AccessToken:
    """Exchange a username and password for an access token.

    Args:
        http: HTTP client to send the request with.
        login: The account credentials.
        auth_url: OAuth token endpoint.
        client_id: OAuth client identifier.

    Returns:
        The decoded token response.

    Raises:
        AuthenticationError: If the credentials are missing or rejected.
        RoosterTeethConnectionError: If the endpoint cannot be reached.
        RoosterTeethError: If the exchange fails for another reason.
    """
    if not login.username or not login.password:
        raise AuthenticationError("Rooster Teeth username and password are required")

    try:
        response = http.post(
            auth_url,
            json={
                "client_id": client_id,
                "grant_type": "password",
                "username": login.username,
                "password": login.password,
                "scope": SCOPE,
            },
            headers={"Content-Type": "application/json"},
        )
    except httpx.RequestError as e:
        raise RoosterTeethConnectionError(f"Connection error during login: {e}") from e

    if response.status_code in (400, 401):
        logger.info("Login rejected for %s (HTTP %s)", login.username, response.status_code)
        raise AuthenticationError("Invalid Rooster Teeth username or password")

    if not response.is_success:
        raise RoosterTeethError(f"Login failed: {response.status_code} - {response.text}")

    token = decode(AccessToken, response.content)
    logger.info("Logged in as %s (token expires in %ss)", login.username, token.expires_in)
    return token
