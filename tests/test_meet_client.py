import pytest
from google.api_core.exceptions import PermissionDenied
from google.apps import meet_v2
from google.auth.exceptions import RefreshError

from backend.services.meet_client import MeetSpaceService, UpstreamError


class FakeSpacesClient:
    def __init__(self, credentials=None, meeting_uri="https://meet.google.com/abc-defg-hij", error=None):
        self.credentials = credentials
        self.meeting_uri = meeting_uri
        self.error = error
        self.requests = []

    def create_space(self, request=None):
        self.requests.append(request)
        if self.error:
            raise self.error
        return meet_v2.Space(name="spaces/abc", meeting_uri=self.meeting_uri)


def test_create_space_returns_meeting_uri():
    clients = []

    def factory(credentials):
        client = FakeSpacesClient(credentials=credentials)
        clients.append(client)
        return client

    uri = MeetSpaceService(client_factory=factory).create_space("creds")

    assert uri == "https://meet.google.com/abc-defg-hij"
    assert clients[0].credentials == "creds"
    assert isinstance(clients[0].requests[0], meet_v2.CreateSpaceRequest)


@pytest.mark.parametrize("error", [PermissionDenied("no access"), RefreshError("invalid_grant")])
def test_create_space_wraps_upstream_errors(error):
    service = MeetSpaceService(client_factory=lambda credentials: FakeSpacesClient(credentials, error=error))
    with pytest.raises(UpstreamError):
        service.create_space("creds")


def test_create_space_rejects_empty_uri():
    service = MeetSpaceService(client_factory=lambda credentials: FakeSpacesClient(credentials, meeting_uri=""))
    with pytest.raises(UpstreamError):
        service.create_space("creds")
