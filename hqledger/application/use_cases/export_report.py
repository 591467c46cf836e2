"""
Export Report Use Case.

Aggregates caller-supplied invoices and expenses into one of the
report tables and returns it as JSON, PDF or XLSX.
"""

from dataclasses import dataclass
from decimal import Decimal

from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import ReportRequestBase
from hqledger.application.dto.responses import (
    ReportColumnResponse,
    ReportResponse,
    ReportSummaryResponse,
)
from hqledger.config import get_logger, get_settings
from hqledger.core.entities.report import ReportKind, ReportTable
from hqledger.core.exceptions import UnsupportedFormatError, ValidationError
from hqledger.core.interfaces import IReportExporter
from hqledger.core.services import ReportAggregator

logger = get_logger(__name__)

JSON_FORMAT = "json"


@dataclass
class ReportExportResult:
    """Aggregated table plus exported bytes for binary formats."""

    table: ReportTable
    output_format: str = JSON_FORMAT
    content: bytes | None = None
    media_type: str = "application/json"
    filename: str | None = None

    @property
    def file_size(self) -> int:
        return len(self.content) if self.content else 0


class ExportReportUseCase:
    """
    Use case for report aggregation and export.

    Flow:
    1. Check the record count against the configured guard
    2. Aggregate with ReportAggregator (as-of defaults to context.today)
    3. Export with the exporter registered for the format, unless JSON
    """

    def __init__(
        self,
        aggregator: ReportAggregator | None = None,
        exporters: dict[str, IReportExporter] | None = None,
    ):
        self._aggregator = aggregator
        self._exporters = exporters

    def _get_aggregator(self) -> ReportAggregator:
        if self._aggregator is None:
            from hqledger.application.services import get_report_aggregator

            self._aggregator = get_report_aggregator()
        return self._aggregator

    def _get_exporters(self) -> dict[str, IReportExporter]:
        if self._exporters is None:
            from hqledger.application.services import get_report_exporters

            self._exporters = get_report_exporters()
        return self._exporters

    @property
    def formats(self) -> list[str]:
        return sorted([JSON_FORMAT, *self._get_exporters()])

    def execute(
        self,
        request: ReportRequestBase,
        output_format: str = JSON_FORMAT,
        context: RequestContext | None = None,
    ) -> ReportExportResult:
        """
        Build and export a report.

        Raises:
            ValidationError: Too many records or unsupported format.
        """
        context = context or RequestContext()
        key = (output_format or JSON_FORMAT).strip().lower()
        exporter = None
        if key != JSON_FORMAT:
            exporter = self._get_exporters().get(key)
            if exporter is None:
                raise UnsupportedFormatError(output_format, self.formats)

        limit = get_settings().api.max_records
        count = request.record_count()
        if count > limit:
            raise ValidationError("records", f"at most {limit} records per report", count)

        flt = request.to_filter()
        if request.kind == ReportKind.INVOICE_AGING and flt.as_of is None:
            flt = flt.model_copy(update={"as_of": context.today})

        logger.info(
            "export_report_started",
            **context.log_fields(),
            report=request.kind.value,
            format=key,
            records=count,
        )
        table = self._get_aggregator().build(
            request.kind,
            invoices=request.invoice_records(),
            expenses=request.expense_records(),
            flt=flt,
        )

        result = ReportExportResult(table=table, output_format=key)
        if exporter is not None:
            result.content = exporter.export(table)
            result.media_type = exporter.media_type
            result.filename = f"{table.report.value}_{context.today.isoformat()}.{exporter.extension}"

        logger.info(
            "export_report_complete",
            **context.log_fields(),
            report=table.report.value,
            rows=len(table.rows),
            file_size=result.file_size,
        )
        return result

    @staticmethod
    def to_response(result: ReportExportResult) -> ReportResponse:
        """Convert the aggregated table to the JSON response."""
        table = result.table
        return ReportResponse(
            report=table.report.value,
            title=table.title,
            subtitle=table.subtitle,
            columns=[
                ReportColumnResponse(key=c.key, header=c.header, kind=c.kind, align=c.align)
                for c in table.columns
            ],
            rows=table.records(),
            summary=[
                ReportSummaryResponse(
                    label=item.label,
                    value=str(item.value) if isinstance(item.value, Decimal) else item.value,
                    kind=item.kind,
                )
                for item in table.summary
            ],
            extra=table.extra,
            row_count=len(table.rows),
        )
