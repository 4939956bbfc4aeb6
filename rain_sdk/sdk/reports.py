"""Report operations."""

from rain_sdk.core.client import Result
from rain_sdk.core.errors import ValidationError
from rain_sdk.core.types import GetReportParams, ReportFormat
from rain_sdk.sdk.base import Operations


class ReportOperations(Operations):
    def get(
        self,
        year: str | int,
        month: str | int,
        day: str | int,
        format: ReportFormat | str | None = None,
    ) -> Result[bytes]:
        """
        Download the daily report for a date.

        Args:
            year: Four-digit year
            month: Month, as the API expects it (e.g. "01")
            day: Day of month (e.g. "15")
            format: csv, json or ssrp (API default when omitted)

        Returns:
            Raw report bytes

        Raises:
            ValidationError: On an unknown format

        """
        if format is not None and not isinstance(format, ReportFormat):
            try:
                format = ReportFormat(format)
            except ValueError:
                choices = ", ".join(f.value for f in ReportFormat)
                raise ValidationError(f"Unknown report format {format!r} (expected one of: {choices})")
        params = GetReportParams(format=format)
        return self._client.get_bytes(f"/reports/{year}/{month}/{day}", params.to_params())
