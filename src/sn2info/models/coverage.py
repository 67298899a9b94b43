"""Coverage summary models (sn2info coverage endpoint)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from sn2info.models.common import ApiRecord, PagedResponse


class BasePid(ApiRecord):
    base_pid: str = ""


class OrderablePid(ApiRecord):
    item_description: str = ""
    item_position: str = ""
    item_type: str = ""  # MAJOR or MINOR
    orderable_pid: str = ""
    pillar_code: str = ""


class CoverageRecord(ApiRecord):
    """Coverage and warranty status for one serial number."""
    base_pid_list: list[BasePid] = Field(default_factory=list)
    contract_site_customer_name: str = ""
    contract_site_address1: str = ""
    contract_site_city: str = ""
    contract_site_state_province: str = ""
    contract_site_country: str = ""
    covered_product_line_end_date: str = ""
    id: str = ""
    is_covered: str = ""  # YES or NO
    orderable_pid_list: list[OrderablePid] = Field(default_factory=list)
    parent_sr_no: str = ""
    service_contract_number: str = ""
    service_line_descr: str = ""
    sr_no: str = ""
    warranty_end_date: str = ""
    warranty_type: str = ""
    warranty_type_description: str = ""

    def summary_row(self) -> dict[str, Any]:
        """Flatten the record into one row for table/CSV output."""
        return {
            "sr_no": self.sr_no,
            "is_covered": self.is_covered,
            "base_pid": ", ".join(p.base_pid for p in self.base_pid_list),
            "orderable_pid": ", ".join(p.orderable_pid for p in self.orderable_pid_list),
            "service_contract_number": self.service_contract_number,
            "service_line_descr": self.service_line_descr,
            "covered_product_line_end_date": self.covered_product_line_end_date,
            "warranty_type": self.warranty_type,
            "warranty_end_date": self.warranty_end_date,
            "contract_site_customer_name": self.contract_site_customer_name,
            "contract_site_country": self.contract_site_country,
        }


class CoverageSummary(PagedResponse):
    """Response of the coverage summary endpoint."""
    serial_numbers: list[CoverageRecord] = Field(default_factory=list)
