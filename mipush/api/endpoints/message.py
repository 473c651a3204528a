from typing import Annotated

from fastapi import APIRouter, Body, HTTPException, Query, status
from pydantic import ValidationError

from mipush.core.exceptions import InvalidMessageError, InvalidTargetError, PushRequestError
from mipush.schemas.message import Platform, SendMessageRequest
from mipush.schemas.notification import AndroidMessage, IOSMessage
from mipush.services.message import message_service

router = APIRouter()

_MESSAGE_TYPES = {
    Platform.IOS: IOSMessage,
    Platform.ANDROID: AndroidMessage,
}


@router.post("/send")
async def send_message(send_request: Annotated[SendMessageRequest, Body(...)]) -> dict:
    """
    Push a message. Exactly one of the targeting fields should be set; `platform`
    selects the structured iOS/Android body, otherwise `message` is sent as is.
    """
    options = send_request.model_dump(exclude_none=True, exclude={"platform", "message"})
    message = send_request.message
    if send_request.platform is not None:
        try:
            message = _MESSAGE_TYPES[send_request.platform].model_validate(message)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Invalid {send_request.platform.value} message: {e}",
            ) from e

    try:
        return await message_service.send(**options, message=message)
    except (InvalidTargetError, InvalidMessageError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except PushRequestError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e


@router.get("/counters")
async def get_message_counters(
    start_date: Annotated[str, Query(description="Start date, yyyyMMdd")],
    end_date: Annotated[str, Query(description="End date, yyyyMMdd, at most 30 days later")],
    package_name: Annotated[str, Query(description="Android package name or iOS bundle id")],
) -> dict:
    try:
        return await message_service.counters(start_date, end_date, package_name)
    except PushRequestError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e
