"""Spreadsheet export infrastructure."""

from hqledger.infrastructure.excel.document_workbook import OpenpyxlDocumentRenderer
from hqledger.infrastructure.excel.report_workbook import OpenpyxlReportExporter

__all__ = ["OpenpyxlDocumentRenderer", "OpenpyxlReportExporter"]
