"""
Render Document Use Case.

Builds the document view once and renders it to PDF, HTML or XLSX.
"""

from hqledger.application.context import RequestContext
from hqledger.application.dto.requests import DocumentRenderRequest
from hqledger.config import get_logger, get_settings
from hqledger.core.services import DocumentService, RenderedDocument

logger = get_logger(__name__)


class RenderDocumentUseCase:
    """
    Use case for rendering an invoice or proposal.

    Flow:
    1. Build the DocumentView (totals, words, QR, logo)
    2. Render with the renderer registered for the format
    3. Return bytes and file metadata
    """

    def __init__(self, document_service: DocumentService | None = None):
        self._document_service = document_service

    def _get_document_service(self) -> DocumentService:
        if self._document_service is None:
            from hqledger.application.services import get_document_service

            self._document_service = get_document_service()
        return self._document_service

    def execute(
        self,
        request: DocumentRenderRequest,
        output_format: str = "pdf",
        context: RequestContext | None = None,
    ) -> RenderedDocument:
        """
        Render the requested document.

        Raises:
            ValidationError: Malformed input or unsupported format.
            ComputationError: Totals could not be computed.
            RenderError: The document as a whole could not be produced.
        """
        context = context or RequestContext()
        service = self._get_document_service()
        logger.info(
            "render_document_started",
            **context.log_fields(),
            document=request.meta.number,
            format=output_format,
        )

        company = request.company
        if not company.company_name:
            company = company.model_copy(
                update={"company_name": get_settings().pdf.default_company_name}
            )
        meta = request.meta
        updates = {}
        if not meta.issue_date:
            updates["issue_date"] = context.today
        if meta.amount_paid == 0 and request.amount_paid > 0:
            updates["amount_paid"] = request.amount_paid
        if updates:
            meta = meta.model_copy(update=updates)

        stored = request.stored_totals.model_dump(exclude_none=True) if request.stored_totals else None
        view = service.build_view(
            line_items=request.line_items,
            discount=request.discount,
            tax_rate=request.tax_rate,
            company=company,
            counterparty=request.client,
            meta=meta,
            stored_totals=stored,
        )
        result = service.render(view, output_format)
        logger.info(
            "render_document_complete",
            **context.log_fields(),
            document=request.meta.number,
            file_size=result.file_size,
        )
        return result
