"""Wire codec for the assistant endpoint.

Request body:
    {"messages": [{"role": "user", "content": "..."}, ...]}

Response bodies:
    {"response": "..."}                   success
    {"error": "...", "details": "..."}    structured failure, details optional

Anything else is an unparseable body. Classification uses one rule: a JSON
object with a string ``response`` key is a success, otherwise a JSON object
with a string ``error`` key is a structured failure, otherwise the body is
reported verbatim. A body carrying both keys counts as a success.
"""

import json
import logging
from collections.abc import Iterable

from pydantic import ValidationError

from .models import ChatError, ChatReply, ChatRequest, Message, Role

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data received from server."
INVALID_URL_MESSAGE = "Invalid URL"


def build_request(messages: Iterable[Message]) -> ChatRequest:
    return ChatRequest(messages=[message.to_wire() for message in messages])


def encode_request(messages: Iterable[Message]) -> bytes:
    """Serialize messages to the request body.

    Output is deterministic: the same messages always give the same bytes,
    in transcript order, with keys in role/content order.
    """
    request = build_request(messages)
    return request.model_dump_json().encode("utf-8")


def decode_response(body: bytes | None) -> Message:
    """Classify a response body into exactly one outcome message."""
    if not body:
        return system_message(NO_DATA_MESSAGE)

    raw = body.decode("utf-8", errors="replace")
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        logger.debug("Response body is not JSON")
        return _unparseable(raw)

    if not isinstance(payload, dict):
        return _unparseable(raw)

    if "response" in payload:
        try:
            reply = ChatReply.model_validate(payload)
        except ValidationError:
            logger.debug("'response' key present but not a string")
        else:
            return Message(role=Role.ASSISTANT, content=reply.response)

    if "error" in payload:
        try:
            error = ChatError.model_validate(payload)
        except ValidationError:
            logger.debug("'error' key present but malformed")
        else:
            return system_message(error.describe())

    return _unparseable(raw)


def describe_transport_error(exc: BaseException) -> Message:
    return system_message(f"Network error: {exc}")


def encode_failure(exc: BaseException) -> Message:
    return system_message(f"Failed to encode payload: {exc}")


def system_message(content: str) -> Message:
    return Message(role=Role.SYSTEM, content=content)


def _unparseable(raw: str) -> Message:
    return system_message(f"Failed to parse response: {raw}")
