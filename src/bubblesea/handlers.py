"""Request handlers for ``/api/bubble/{id}``."""

from __future__ import annotations

import logging

from aiohttp import web
from pydantic import ValidationError

from bubblesea._logfmt import preview_for_log
from bubblesea.exceptions import BubbleNotFoundError, MalformedRequestBodyError
from bubblesea.models import NOT_FOUND_PAYLOAD, WRITE_OK_PAYLOAD, BubbleRead, BubbleWrite
from bubblesea.store import BubbleStore

_logger = logging.getLogger(__name__)

STORE_KEY: web.AppKey[BubbleStore] = web.AppKey("bubble_store", BubbleStore)


def parse_write_body(bubble_id: str, body: bytes) -> BubbleWrite:
    """Decode a write request body.

    Raises
    ------
    MalformedRequestBodyError
        If *body* is not a JSON object with a string ``Bubble`` field.
    """
    try:
        return BubbleWrite.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedRequestBodyError(
            f"Invalid bubble payload for {bubble_id!r}: {exc.error_count()} error(s)",
            bubble_id=bubble_id,
        ) from exc


async def modify_bubble(request: web.Request) -> web.Response:
    """Store the posted bubble under the id from the path."""
    bubble_id = request.match_info["id"]
    body = await request.read()

    try:
        data = parse_write_body(bubble_id, body)
    except MalformedRequestBodyError as exc:
        _logger.debug("Rejected write: %s", exc)
        raise web.HTTPBadRequest() from exc

    _logger.debug("Write id=%s bubble=%r", bubble_id, preview_for_log(data.bubble))
    request.app[STORE_KEY].put(bubble_id, data.bubble)
    return web.json_response(WRITE_OK_PAYLOAD)


async def lookup_bubble(request: web.Request) -> web.Response:
    """Return the bubble stored under the id from the path."""
    bubble_id = request.match_info["id"]

    try:
        value = request.app[STORE_KEY].get(bubble_id)
    except BubbleNotFoundError:
        return web.json_response(NOT_FOUND_PAYLOAD, status=404)

    return web.json_response(BubbleRead(bubble=value).to_payload())
