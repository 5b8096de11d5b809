"""
Request body parsing for record writes.

Create and update endpoints take either a JSON object or a form body. Form
bodies may carry one file part for the record's profile column.
"""

from typing import Any, AsyncGenerator, Callable, Dict, NamedTuple, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.datastructures import UploadFile


class RecordPayload(NamedTuple):
    fields: Dict[str, Any]
    upload: Optional[UploadFile] = None


def _invalid_body(message: str) -> RequestValidationError:
    return RequestValidationError([
        {"loc": ("body",), "msg": message, "type": "value_error"}
    ])


def record_payload(file_field: str) -> Callable:
    """
    Build a dependency that reads a record payload from the request body.

    Form bodies stay open while the endpoint runs and every file part is
    closed once it returns.

    Args:
        file_field: Name of the multipart part holding the profile file

    Returns:
        An async generator dependency yielding a ``RecordPayload``
    """

    async def read_payload(request: Request) -> AsyncGenerator[RecordPayload, None]:
        content_type = request.headers.get("content-type", "")

        if content_type.startswith("application/json"):
            try:
                body = await request.json()
            except ValueError:
                raise _invalid_body("Malformed JSON body")
            if not isinstance(body, dict):
                raise _invalid_body("Request body must be a JSON object")
            yield RecordPayload(fields=body)
            return

        form = await request.form()
        try:
            fields: Dict[str, Any] = {}
            upload = None
            for key, value in form.multi_items():
                if isinstance(value, UploadFile):
                    # An empty file input still arrives as a part without a filename
                    if key == file_field and value.filename:
                        upload = value
                    continue
                fields[key] = value
            yield RecordPayload(fields=fields, upload=upload)
        finally:
            await form.close()

    return read_payload
