"""Decode API response bodies into typed records."""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from sn2info.utils.errors import DecodeError
from sn2info.utils.output import print_raw_json

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(response: httpx.Response, model: type[ModelT], debug: bool = False) -> ModelT:
    """Parse the full response body as JSON and validate it against ``model``.

    The raw body is echoed, re-indented but otherwise untouched, only once it
    has decoded cleanly.

    Raises:
        DecodeError: The body is not JSON or does not match the model.
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeError(f"{model.__name__}: response body is not valid JSON: {e}") from e

    try:
        record = model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DecodeError(
            f"{model.__name__}: JSON response does not match the expected schema "
            f"({e.error_count()} error(s), first at {location}: {first['msg']})"
        ) from e

    if debug:
        print_raw_json(response.text)
    return record
