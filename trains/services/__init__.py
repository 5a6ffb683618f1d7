"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- NetworkReportService: Runs the standard queries on a rail network
"""

from .network_report import (
    STANDARD_QUERIES,
    NetworkReportService,
    QueryResult,
    format_report,
)

__all__ = ["NetworkReportService", "QueryResult", "STANDARD_QUERIES", "format_report"]
