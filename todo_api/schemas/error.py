"""
Todo API — Error Envelope Schema
=================================

What:  The single client-facing error shape, `{"msg": "..."}`.
Why:   Clients parse one error structure for every failure; the HTTP status
       travels on the status line only.
How:   `status` is marked `exclude=True` and `SkipJsonSchema`: it is carried on
       the model (so the response status and body come from the same value)
       but never serialized and never shown in the OpenAPI component.
Who:   Built from exceptions by the global handlers in main.py; referenced
       in every route's response table.

Example:
    >>> err = HttpError(msg="path not found: nope.js", status=HTTPStatus.NOT_FOUND)
    >>> str(err)
    '[404 Not Found] path not found: nope.js'
    >>> err.model_dump()
    {'msg': 'path not found: nope.js'}
"""

from http import HTTPStatus

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pydantic.json_schema import SkipJsonSchema


def format_status(status: HTTPStatus) -> str:
    """Render a status as "<code> <reason phrase>", e.g. "404 Not Found"."""
    return f"{status.value} {status.phrase}"


class HttpError(BaseModel):
    """
    An HTTP error response.

    Attributes:
        msg:     Human-readable error message (the only serialized field)
        status:  HTTP status code, excluded from serialization
    """

    msg: str = Field(description="The error message")
    status: SkipJsonSchema[HTTPStatus] = Field(
        default=HTTPStatus.INTERNAL_SERVER_ERROR,
        exclude=True,
        description="The HTTP status code, skipped in serialization",
    )

    def __str__(self) -> str:
        return f"[{format_status(self.status)}] {self.msg}"

    def to_response(self) -> JSONResponse:
        """Build the transport response: status line from `status`, body `{"msg": ...}`."""
        return JSONResponse(status_code=int(self.status), content=self.model_dump(mode="json"))
