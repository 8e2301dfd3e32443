from __future__ import annotations

import asyncio

from backend.services.authorizer import Authorizer
from backend.services.meet_client import MeetSpaceService


class MeetController:
    def __init__(self, authorizer: Authorizer | None = None, meet: MeetSpaceService | None = None):
        self.authorizer = authorizer or Authorizer()
        self.meet = meet or MeetSpaceService()

    async def create_meet_link(self) -> dict:
        # The consent flow and the gRPC call both block, keep them off the event loop.
        credentials = await asyncio.to_thread(self.authorizer.authorize)
        meet_link = await asyncio.to_thread(self.meet.create_space, credentials)
        return {"meetLink": meet_link}
