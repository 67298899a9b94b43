"""OAuth2 client-credentials authentication for the Cisco support APIs.

A token is fetched at most once per run. It is neither cached nor renewed.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx

from sn2info.config import Config
from sn2info.models.auth import TokenResponse
from sn2info.utils.errors import ConfigError, CredentialsError, DecodeError, NetworkError

logger = logging.getLogger(__name__)

GRANT_TYPE = "client_credentials"


class Authenticator:
    """Exchanges a client id/secret for a bearer token."""

    def __init__(self, token_url: str, client_id: str, client_secret: str) -> None:
        self._token_url = token_url
        self._client_id = client_id
        self._client_secret = client_secret
        self._http = httpx.Client(timeout=30.0)

    @classmethod
    def from_config(cls, config: Config) -> Authenticator:
        return cls(
            config.endpoints.token_url,
            config.settings.client_id,
            config.settings.client_secret,
        )

    def fetch_token(self) -> TokenResponse:
        """Request a new access token.

        Returns:
            The decoded token response.

        Raises:
            NetworkError: The token endpoint could not be reached.
            CredentialsError: The endpoint rejected the credentials.
            DecodeError: The endpoint answered with something other than a token.
        """
        logger.info(f"POST {self._token_url} (grant_type={GRANT_TYPE})")
        try:
            response = self._http.post(
                self._token_url,
                data={
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "grant_type": GRANT_TYPE,
                },
            )
        except httpx.HTTPError as e:
            raise NetworkError(f"Token request to {self._token_url} failed: {e}") from e
        except httpx.InvalidURL as e:
            raise ConfigError(
                f"Invalid token URL {self._token_url!r}, check config/endpoints.yaml: {e}"
            ) from e

        if response.status_code >= 400:
            error_detail = response.text
            try:
                error_json = response.json()
                error_detail = error_json.get("error_description", error_json.get("error", response.text))
            except (ValueError, AttributeError):
                pass
            raise CredentialsError(
                f"Token request failed (HTTP {response.status_code}): {error_detail}"
            )

        try:
            return TokenResponse.model_validate(response.json())
        except ValueError as e:
            raise DecodeError(f"Token endpoint returned an invalid JSON token response: {e}") from e

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()


def resolve_token(
    config: Config,
    authenticator_factory: Callable[[Config], Authenticator] = Authenticator.from_config,
) -> tuple[str, bool]:
    """Return the bearer token to use and whether it was freshly issued.

    A configured AUTH_TOKEN is used as-is and no authentication call is made.
    """
    if config.settings.auth_token:
        logger.info("Using bearer token from AUTH_TOKEN")
        return config.settings.auth_token, False

    if not config.has_client_credentials:
        raise CredentialsError(
            "CLIENT_ID and CLIENT_SECRET must be set when AUTH_TOKEN is not"
        )

    authenticator = authenticator_factory(config)
    try:
        token = authenticator.fetch_token()
    finally:
        authenticator.close()
    return token.access_token, True
