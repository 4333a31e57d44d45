"""
Todo API — Error Model Tests
=============================

What:  Tests for the HttpError envelope and the exception hierarchy.

What we test:
    ✅ `status` is never serialized
    ✅ Display form "[<code> <phrase>] <msg>"
    ✅ Response status line and body come from the same HttpError
    ✅ Each exception maps to the expected status
"""

import json
from http import HTTPStatus

import pytest

from todo_api.exceptions import (
    InternalServerError,
    NotFoundError,
    TodoApiError,
    ValidationError,
)
from todo_api.schemas.error import HttpError


class TestHttpError:

    @pytest.mark.parametrize("status", [HTTPStatus.BAD_REQUEST, HTTPStatus.NOT_FOUND, HTTPStatus.INTERNAL_SERVER_ERROR])
    def test_status_is_never_serialized(self, status):
        err = HttpError(msg="boom", status=status)

        assert err.model_dump() == {"msg": "boom"}
        assert json.loads(err.model_dump_json()) == {"msg": "boom"}

    def test_display(self):
        err = HttpError(msg="path not found: x", status=HTTPStatus.NOT_FOUND)

        assert str(err) == "[404 Not Found] path not found: x"

    def test_default_status_is_500(self):
        assert HttpError(msg="x").status == HTTPStatus.INTERNAL_SERVER_ERROR

    def test_to_response(self):
        response = HttpError(msg="gone", status=HTTPStatus.NOT_FOUND).to_response()

        assert response.status_code == 404
        assert json.loads(response.body) == {"msg": "gone"}
        assert response.media_type == "application/json"


class TestExceptionHierarchy:

    @pytest.mark.parametrize(
        "exc, status",
        [
            (ValidationError("bad title"), HTTPStatus.BAD_REQUEST),
            (NotFoundError(resource="todo", resource_id=3), HTTPStatus.NOT_FOUND),
            (InternalServerError(), HTTPStatus.INTERNAL_SERVER_ERROR),
            (TodoApiError(), HTTPStatus.INTERNAL_SERVER_ERROR),
        ],
    )
    def test_maps_to_envelope(self, exc, status):
        err = exc.to_http_error()

        assert err.status == status
        assert err.msg == exc.message
        assert "status" not in err.model_dump()

    def test_all_are_todo_api_errors(self):
        for cls in (ValidationError, NotFoundError, InternalServerError):
            assert issubclass(cls, TodoApiError)

    def test_display_matches_envelope(self):
        exc = NotFoundError(resource="todo", resource_id=3)

        assert str(exc) == "[404 Not Found] todo with ID '3' was not found"
        assert str(exc) == str(exc.to_http_error())

    def test_not_found_custom_message(self):
        exc = NotFoundError(resource="asset", message="path not found: a.js")

        assert exc.message == "path not found: a.js"
        assert exc.context == {"resource": "asset"}

    def test_validation_error_defaults(self):
        exc = ValidationError()

        assert exc.message == "Validation failed"
        assert exc.context == {}

    def test_context_is_not_exposed(self):
        exc = InternalServerError("failed", context={"secret": "value"})

        assert exc.to_http_error().model_dump() == {"msg": "failed"}
