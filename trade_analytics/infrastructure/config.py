"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for trade inputs and report outputs
- AnalysisConfig: Parameters for the metrics calculator (from domain.config)

Directory Structure:
    data/
    ├── trades/                  # Extracted trade rows (csv/parquet/json)
    │   ├── 2024.csv
    │   └── ...
    └── reports/                 # Exported P&L reports
        └── summary.xlsx
"""

from dataclasses import dataclass
from pathlib import Path

from trade_analytics.domain.config import DEFAULT_CONFIG, AnalysisConfig

TRADE_FILE_SUFFIXES = (".csv", ".parquet", ".json")


@dataclass(frozen=True)
class DataPaths:
    """File paths for data sources.

    Attributes:
        root: Project root directory
    """

    root: Path = Path(".")

    # --- Directories ---

    @property
    def data_dir(self) -> Path:
        """Main data directory."""
        return self.root / "data"

    @property
    def trades_dir(self) -> Path:
        """Extracted trade rows."""
        return self.data_dir / "trades"

    @property
    def reports_dir(self) -> Path:
        """Exported reports."""
        return self.data_dir / "reports"

    # --- Helper Methods ---

    def trade_file(self, name: str) -> Path:
        """Path to a trade file; bare names get a .csv suffix."""
        path = self.trades_dir / name
        return path if path.suffix else path.with_suffix(".csv")

    def list_trade_files(self) -> list[Path]:
        """List all readable trade files."""
        if not self.trades_dir.exists():
            return []
        return sorted(
            p for p in self.trades_dir.iterdir() if p.suffix in TRADE_FILE_SUFFIXES
        )

    def validate(self) -> list[str]:
        """Check which required paths are missing.

        Returns:
            List of missing paths (empty if all exist)
        """
        missing = []
        if not self.trades_dir.exists():
            missing.append(str(self.trades_dir))
        return missing

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.trades_dir.mkdir(parents=True, exist_ok=True)
        self.reports_dir.mkdir(parents=True, exist_ok=True)


# Default instances
DEFAULT_PATHS = DataPaths()
