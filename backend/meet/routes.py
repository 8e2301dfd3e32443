from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.services.authorizer import AuthError
from backend.services.meet_client import UpstreamError

from .controller import MeetController

router = APIRouter()
controller = MeetController()
logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


@router.post("/create-meet")
async def create_meet():
    try:
        return await controller.create_meet_link()
    except (AuthError, UpstreamError):
        logger.exception("Error creating Meet link")
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)
