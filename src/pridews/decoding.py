"""Schema-tolerant decoding of web-service response bodies."""

from __future__ import annotations

import re
from typing import TypeVar

import structlog
from pydantic import ValidationError

from pridews.errors import ParseError
from pridews.models import ArchiveRecord

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=ArchiveRecord)

_PREVIEW_CHARS = 200
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def decode(model: type[RecordT], text: str) -> RecordT:
    """Parse a JSON body into ``model``, ignoring fields the record does not declare."""
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        logger.warning("decode.failed", model=model.__name__, errors=exc.error_count())
        raise ParseError(
            f"Cannot decode {model.__name__} from response {_preview(text)!r}: {exc}",
            text=text,
        ) from exc


def decode_count(text: str) -> int:
    """Parse the count endpoint's plain-text integer body."""
    literal = text.strip()
    if not INTEGER_LITERAL.fullmatch(literal):
        logger.warning("decode.failed", model="count")
        raise ParseError(f"Count response is not an integer: {_preview(text)!r}", text=text)
    return int(literal)


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_CHARS:
        return text
    return text[:_PREVIEW_CHARS] + "..."
