"""JSON encoding of request bodies."""

from __future__ import annotations

import json

from ..config import EncoderConfig
from .errors import TicketSwitchEncodeError

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def _escape_html(text: str) -> str:
    for raw, escaped in _HTML_ESCAPES.items():
        text = text.replace(raw, escaped)
    return text


def encode_body(body: object, encoder: EncoderConfig) -> bytes:
    """Encode ``body`` as UTF-8 JSON terminated by a newline.

    Keys are sorted. Characters that would be significant in HTML are only
    escaped when ``encoder.escape_html`` is set.
    """

    try:
        if encoder.indent:
            text = json.dumps(body, indent=2, sort_keys=True, ensure_ascii=False)
        else:
            text = json.dumps(body, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise TicketSwitchEncodeError("request body is not JSON encodable") from exc

    # <, > and & never occur inside JSON syntax, so escaping the encoded text
    # only touches string contents.
    if encoder.escape_html:
        text = _escape_html(text)
    return (text + "\n").encode("utf-8")


__all__ = [
    "encode_body",
]
