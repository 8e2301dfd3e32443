from __future__ import annotations

from typing import Any, Callable

from google.api_core.exceptions import GoogleAPIError
from google.apps import meet_v2
from google.auth.exceptions import GoogleAuthError


class UpstreamError(Exception):
    """The Meet API call failed."""


class MeetSpaceService:
    def __init__(self, client_factory: Callable[..., Any] | None = None):
        self.client_factory = client_factory or meet_v2.SpacesServiceClient

    def create_space(self, credentials: Any) -> str:
        client = self.client_factory(credentials=credentials)
        try:
            response = client.create_space(request=meet_v2.CreateSpaceRequest())
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise UpstreamError(f"create_space failed: {exc}") from exc
        if not response.meeting_uri:
            raise UpstreamError("create_space returned no meeting URI")
        return response.meeting_uri
