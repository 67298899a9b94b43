"""Product information models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from sn2info.models.common import ApiRecord, PagedResponse


class Dimensions(ApiRecord):
    dimensions_format: str = ""
    dimensions_value: str = ""


class RichMediaUrls(ApiRecord):
    small_image_url: str = ""
    large_image_url: str = ""


class ProductRecord(ApiRecord):
    """Catalog metadata for the product a serial number belongs to."""
    id: str = ""
    sr_no: str = ""
    base_pid: str = ""
    orderable_pid: str = ""
    product_name: str = ""
    product_type: str = ""
    product_series: str = ""
    product_category: str = ""
    product_subcategory: str = ""
    release_date: str = ""
    orderable_status: str = ""
    dimensions: Dimensions = Field(default_factory=Dimensions)
    weight: str = ""
    form_factor: str = ""
    product_support_page: str = ""
    visio_stencil_url: str = ""
    rich_media_urls: RichMediaUrls = Field(default_factory=RichMediaUrls)

    def summary_row(self) -> dict[str, Any]:
        """Flatten the record into one row for table/CSV output."""
        return {
            "sr_no": self.sr_no,
            "base_pid": self.base_pid,
            "orderable_pid": self.orderable_pid,
            "product_name": self.product_name,
            "product_series": self.product_series,
            "product_category": self.product_category,
            "product_subcategory": self.product_subcategory,
            "release_date": self.release_date,
            "orderable_status": self.orderable_status,
            "dimensions": " ".join(
                part for part in (self.dimensions.dimensions_value, self.dimensions.dimensions_format) if part
            ),
            "weight": self.weight,
            "form_factor": self.form_factor,
        }


class ProductInfo(PagedResponse):
    """Response of the product information endpoint."""
    product_list: list[ProductRecord] = Field(default_factory=list)
