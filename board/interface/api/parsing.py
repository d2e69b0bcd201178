"""Request parsing.

Path ids and JSON bodies are parsed into tagged results before any field is
read, so handlers never touch a malformed request.
"""

import json
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from fastapi import Request, status
from pydantic import BaseModel, ValidationError

from board.domain.value import MAX_ID
from board.interface.error import APIError, invalid_id

T = TypeVar("T", bound=BaseModel)

_ID_PATTERN = re.compile(r"[1-9][0-9]*")


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    """Body parsed into its schema."""

    value: T


@dataclass(frozen=True)
class ParseFailure:
    """Body rejected with an error code."""

    code: str
    message: str

    def to_api_error(self) -> APIError:
        return APIError(status.HTTP_400_BAD_REQUEST, self.code, self.message)


ParseResult = ParseSuccess[T] | ParseFailure


def parse_id(raw: str) -> int:
    """Parse a path id (positive decimal integer within the id range).

    Raises:
        APIError: INVALID_ID for anything else
    """
    if not _ID_PATTERN.fullmatch(raw) or int(raw) > MAX_ID:
        raise invalid_id()
    return int(raw)


def parse_positive_int(
    raw: str | None, code: str, name: str, maximum: int | None = None
) -> int | None:
    """Parse an optional positive integer query parameter.

    Raises:
        APIError: With ``code`` if the value is not a positive integer, or
            exceeds ``maximum`` when one is given
    """
    if raw is None or raw == "":
        return None
    if not _ID_PATTERN.fullmatch(raw):
        raise APIError(
            status.HTTP_400_BAD_REQUEST, code, f"{name} must be a positive integer."
        )
    if maximum is not None and int(raw) > maximum:
        raise APIError(
            status.HTTP_400_BAD_REQUEST, code, f"{name} must not exceed {maximum}."
        )
    return int(raw)


def validate_body(
    data: object,
    model: type[T],
    field_codes: dict[str, str],
    default_code: str = "INVALID_BODY",
) -> ParseResult:
    """Validate decoded JSON against a body schema.

    Args:
        data: Decoded JSON document
        model: Body schema (strict field types)
        field_codes: Error code per field name for wrong-typed or missing fields
        default_code: Code for failures not attributable to a known field

    Returns:
        ParseSuccess with the model, or ParseFailure with the first error
    """
    if not isinstance(data, dict):
        return ParseFailure("INVALID_BODY", "Request body must be a JSON object.")

    try:
        return ParseSuccess(model.model_validate(data))
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else ""
        code = field_codes.get(field, default_code)
        return ParseFailure(code, f"Invalid field '{field}': {error['msg']}.")


async def parse_body(
    request: Request,
    model: type[T],
    field_codes: dict[str, str],
    default_code: str = "INVALID_BODY",
) -> ParseResult:
    """Read the JSON body of a request and validate it.

    Returns:
        ParseFailure(INVALID_BODY) for a body that is not JSON
    """
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else None
    except (UnicodeDecodeError, json.JSONDecodeError):
        return ParseFailure("INVALID_BODY", "Request body must be valid JSON.")

    return validate_body(data, model, field_codes, default_code)
