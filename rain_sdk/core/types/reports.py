"""Report types."""

from dataclasses import dataclass
from enum import Enum

from rain_sdk.core.types.base import QueryParams


class ReportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    SSRP = "ssrp"


@dataclass
class GetReportParams(QueryParams):
    format: ReportFormat | None = None
