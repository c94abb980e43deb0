import logging
import urllib.parse

from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from honestbot.py.slack.client import SlackClient, SlackError
from honestbot.py.slack.models import InteractionPayload
from honestbot.py.slack.util import LookupStatus, find_submitted_value
from honestbot.py.util.block import IMPRESSION_ACTION_ID, IMPRESSION_BLOCK_ID

logger = logging.getLogger("uvicorn")


class BadRequest(Exception):
    """Exception for interaction requests that can't be handled as sent"""


def parse_payload(body: bytes) -> InteractionPayload:
    """Interactions arrive as a urlencoded form with a single `payload` field
    holding the JSON document.

    See https://api.slack.com/interactivity/handling#payloads"""
    try:
        form = urllib.parse.parse_qs(body.decode("utf-8"))
    except UnicodeDecodeError:
        raise BadRequest("failed to parse form")

    # first value wins when the field is repeated
    payload = form.get("payload", [""])[0]
    if not payload:
        raise BadRequest("missing payload")

    try:
        return InteractionPayload.model_validate_json(payload)
    except ValidationError:
        raise BadRequest("invalid JSON payload")


async def open_impression_modal(
    payload: InteractionPayload,
    slack: SlackClient
) -> Response:
    if not payload.trigger_id:
        raise BadRequest("missing trigger_id")

    try:
        await slack.open_modal(payload.trigger_id)
    except SlackError as e:
        logger.error(f"Failed to open modal: {e}")
        return PlainTextResponse("failed to open modal", status_code=500)

    return Response(status_code=200)


def record_impression(payload: InteractionPayload) -> Response:
    values = payload.view.state.values if payload.view is not None else {}
    status, impression = find_submitted_value(
        values,
        IMPRESSION_BLOCK_ID,
        IMPRESSION_ACTION_ID
    )
    if status == LookupStatus.MISSING:
        logger.warning(
            f"submission has no {IMPRESSION_BLOCK_ID}.{IMPRESSION_ACTION_ID} "
            "value, recording it as empty"
        )

    logger.info(f"New honest impression : {impression}")
    # an empty object tells Slack to close the modal
    return JSONResponse({})


async def handle_interaction(body: bytes, slack: SlackClient) -> Response:
    payload = parse_payload(body)

    if payload.type == "shortcut":
        return await open_impression_modal(payload, slack)
    elif payload.type == "view_submission":
        return record_impression(payload)

    raise BadRequest("unsupported interaction type")
