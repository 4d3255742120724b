"""Infrastructure layer for Trade Analytics.

Contains:
- config: Data paths and analysis configuration
- repositories: Trade file access
"""

from trade_analytics.infrastructure.config import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
)
from trade_analytics.infrastructure.repositories import (
    Repository,
    RepositoryError,
    TradeRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    # Repositories
    "Repository",
    "RepositoryError",
    "TradeRepository",
]
