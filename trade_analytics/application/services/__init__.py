"""Application Services for Trade Analytics.

Services orchestrate repository access and domain calculations.

Available services:
- ReportService: P&L report building and export
"""

from trade_analytics.application.services.report import (
    ReportService,
    PnLReport,
)

__all__ = [
    "ReportService",
    "PnLReport",
]
