"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: Business logic orchestration
  - report.py: P&L report building and export
"""

from trade_analytics.application.services import (
    ReportService,
    PnLReport,
)

__all__ = [
    "ReportService",
    "PnLReport",
]
