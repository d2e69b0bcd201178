"""Unit tests for request parsing."""

import pytest
from pydantic import BaseModel, Field, StrictInt, StrictStr

from board.interface.api.parsing import (
    ParseFailure,
    ParseSuccess,
    parse_id,
    parse_positive_int,
    validate_body,
)
from board.interface.error import APIError


class _Body(BaseModel):
    handle: StrictStr
    parent_id: StrictInt | None = Field(default=None, alias="parentId", gt=0)


FIELD_CODES = {"handle": "INVALID_HANDLE", "parentId": "INVALID_PARENT_ID"}


class TestParseId:
    """Tests for parse_id."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("1", 1), ("42", 42), ("900001", 900001), ("2147483647", 2147483647)],
    )
    def test_accepts_positive_integers(self, raw, expected):
        assert parse_id(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "0", "-1", "01", "1e3", "abc", " 1", "1.0", "1\n", "2147483648", "99999999999"],
    )
    def test_rejects_everything_else(self, raw):
        with pytest.raises(APIError) as exc_info:
            parse_id(raw)

        assert exc_info.value.status_code == 400
        assert exc_info.value.code == "INVALID_ID"


class TestParsePositiveInt:
    """Tests for parse_positive_int."""

    def test_missing_value(self):
        assert parse_positive_int(None, "INVALID_LIMIT", "limit") is None
        assert parse_positive_int("", "INVALID_LIMIT", "limit") is None

    def test_valid_value(self):
        assert parse_positive_int("20", "INVALID_LIMIT", "limit") == 20

    def test_invalid_value_uses_given_code(self):
        with pytest.raises(APIError) as exc_info:
            parse_positive_int("-5", "INVALID_CURSOR", "cursor")

        assert exc_info.value.code == "INVALID_CURSOR"

    def test_trailing_newline_is_rejected(self):
        with pytest.raises(APIError):
            parse_positive_int("5\n", "INVALID_LIMIT", "limit")

    def test_maximum(self):
        assert parse_positive_int("2147483647", "INVALID_CURSOR", "cursor", 2**31 - 1) == (
            2**31 - 1
        )

        with pytest.raises(APIError) as exc_info:
            parse_positive_int("2147483648", "INVALID_CURSOR", "cursor", 2**31 - 1)

        assert exc_info.value.code == "INVALID_CURSOR"


class TestValidateBody:
    """Tests for validate_body."""

    def test_success(self):
        result = validate_body({"handle": "bob", "parentId": 3}, _Body, FIELD_CODES)

        assert isinstance(result, ParseSuccess)
        assert result.value.parent_id == 3

    @pytest.mark.parametrize("data", [None, [], "text", 3])
    def test_non_object_body(self, data):
        result = validate_body(data, _Body, FIELD_CODES)

        assert isinstance(result, ParseFailure)
        assert result.code == "INVALID_BODY"

    @pytest.mark.parametrize(
        "data,code",
        [
            ({}, "INVALID_HANDLE"),
            ({"handle": 12}, "INVALID_HANDLE"),
            ({"handle": "bob", "parentId": "7"}, "INVALID_PARENT_ID"),
            ({"handle": "bob", "parentId": True}, "INVALID_PARENT_ID"),
            ({"handle": "bob", "parentId": -2}, "INVALID_PARENT_ID"),
        ],
    )
    def test_field_failures_map_to_field_codes(self, data, code):
        result = validate_body(data, _Body, FIELD_CODES)

        assert isinstance(result, ParseFailure)
        assert result.code == code

    def test_default_code(self):
        result = validate_body({}, _Body, {}, default_code="INVALID_INPUT")

        assert result.code == "INVALID_INPUT"
        assert result.to_api_error().status_code == 400
