"""Models shared by the coverage and product payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator


class ApiRecord(BaseModel):
    """Base for API payload models.

    Unknown keys are ignored and an explicit ``null`` reads as the field's
    zero value, since the API sends empty fields either way. Integer fields
    are strict: ``"1"`` or ``true`` where a number belongs is a schema error.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class PaginationRecord(ApiRecord):
    """Paging metadata returned with every list response. Never followed."""
    last_index: StrictInt = 0
    page_index: StrictInt = 0
    page_records: StrictInt = 0
    self_link: str = ""
    title: str = ""
    total_records: StrictInt = 0


class PagedResponse(ApiRecord):
    pagination_response_record: PaginationRecord = Field(default_factory=PaginationRecord)
