"""Transport codec for DevTools envelopes.

JSON text is the only wire encoding. Every inbound frame decodes to
exactly one of :class:`Response`, :class:`TargetMessage` or :class:`Event`;
anything else is an error.
"""

from __future__ import annotations

from typing import Union

from .. import json
from ..errors import CDPError
from ..protocol import fields
from ..protocol.message import Event, MethodCall, Response, TargetMessage


Envelope = Union[Response, Event, TargetMessage]


class CodecError(CDPError):
    """Base class for frames that cannot be decoded. The offending frame
    is retained as *text*."""

    def __init__(self, reason: str, text):
        CDPError.__init__(self, f"{reason}: {text!r}")
        self.reason = reason
        self.text = text


class MalformedMessage(CodecError):
    """The frame is not a well-formed envelope."""


class UnexpectedMessage(CodecError):
    """The frame is a JSON object, but neither a response nor an event."""


def encode(call: MethodCall) -> str:
    """Return the JSON text for an outgoing method call."""

    return json.dumps(call.to_dict()).decode("utf-8")


def decode(text) -> Envelope:
    """Parse one text frame into an envelope."""

    try:
        envelope = json.loads(text)
    except json.DecodeError as exc:
        raise MalformedMessage("invalid JSON", text) from exc

    if not isinstance(envelope, dict):
        raise MalformedMessage("envelope is not an object", text)

    if fields.ID in envelope:
        return _decode_response(envelope, text)

    if fields.METHOD in envelope:
        return _decode_event(envelope, text)

    raise UnexpectedMessage("neither a response nor an event", text)


def _decode_response(envelope: dict, text) -> Response:

    call_id = envelope[fields.ID]

    # bool is an int subclass, and never a valid id.
    if not isinstance(call_id, int) or isinstance(call_id, bool) or call_id < 0:
        raise MalformedMessage("response id is not a non-negative integer", text)

    if fields.ERROR in envelope:
        error = envelope[fields.ERROR]
        if not isinstance(error, dict):
            raise MalformedMessage("response error is not an object", text)

        code = error.get(fields.CODE)
        message = error.get(fields.MESSAGE)
        if not isinstance(code, int) or not isinstance(message, str):
            raise MalformedMessage("response error lacks a code or message", text)

        return Response(call_id, error=error)

    if fields.RESULT in envelope:
        return Response(call_id, result=envelope[fields.RESULT])

    raise MalformedMessage("response has neither result nor error", text)


def _decode_event(envelope: dict, text) -> Event:

    method = envelope[fields.METHOD]
    if not isinstance(method, str):
        raise MalformedMessage("event method is not a string", text)

    params = envelope.get(fields.PARAMS)
    if params is None:
        params = {}
    elif not isinstance(params, dict):
        raise MalformedMessage("event params is not an object", text)

    if method == fields.RECEIVED_MESSAGE_FROM_TARGET:
        if not isinstance(params.get(fields.MESSAGE), str):
            raise MalformedMessage("target message carries no message text", text)
        return TargetMessage(params)

    return Event(method, params)
