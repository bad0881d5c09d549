"""Service layer for broadcast reports."""

from .report_service import ReportService

__all__ = ["ReportService"]
