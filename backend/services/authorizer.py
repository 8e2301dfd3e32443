from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from backend.config import Settings, get_settings
from backend.models.credential_model import ClientSecretBundle
from backend.services.credential_store import CredentialStore, WriteError

logger = logging.getLogger(__name__)

ConsentFlow = Callable[[Path, Sequence[str]], Credentials]


class AuthError(Exception):
    """No usable authorization could be obtained for this request."""


def run_local_consent_flow(client_secrets_path: Path, scopes: Sequence[str], port: int = 0) -> Credentials:
    """Open the browser consent screen and wait for the redirect on localhost."""
    flow = InstalledAppFlow.from_client_secrets_file(str(client_secrets_path), list(scopes))
    return flow.run_local_server(port=port)


class Authorizer:
    def __init__(
        self,
        store: CredentialStore | None = None,
        settings: Settings | None = None,
        consent_flow: ConsentFlow | None = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or CredentialStore(self.settings.token_path)
        self.consent_flow = consent_flow or self._default_consent_flow

    def _default_consent_flow(self, client_secrets_path: Path, scopes: Sequence[str]) -> Credentials:
        return run_local_consent_flow(client_secrets_path, scopes, port=self.settings.oauth_redirect_port)

    def authorize(self) -> Credentials:
        """Return credentials for the Meet API, asking the user only on a cache miss.

        A cached grant is used as is; an expired or revoked refresh token
        shows up later, when the API call tries to mint an access token.
        """
        scopes = list(self.settings.meet_scopes)
        cached = self.store.load()
        if cached is not None:
            return Credentials.from_authorized_user_info(cached.model_dump(), scopes)

        logger.info("No cached credential, starting interactive authorization")
        try:
            credentials = self.consent_flow(self.settings.credentials_path, scopes)
        except (OSError, ValueError, GoogleAuthError, OAuth2Error) as exc:
            raise AuthError("Interactive authorization failed") from exc

        refresh_token = getattr(credentials, "refresh_token", None)
        if not refresh_token:
            logger.info("Authorization returned no refresh token, nothing to cache")
            return credentials

        try:
            bundle = ClientSecretBundle.from_file(self.settings.credentials_path)
        except (OSError, ValueError) as exc:
            raise AuthError(f"Cannot read client secrets from {self.settings.credentials_path}") from exc

        try:
            self.store.save(bundle, refresh_token)
        except WriteError:
            logger.warning("Credential was not cached, the next request will re-authorize", exc_info=True)
        return credentials
