"""Trade Repository: Load extracted trade rows from disk.

Reads a single trade file produced by an upstream import step:
- .csv via pl.read_csv
- .parquet via pl.read_parquet
- .json (array of row objects) via pl.read_json

Column names may be snake_case or camelCase; rows are handed to the
normalizer unchanged.
"""

from datetime import date
import logging
from pathlib import Path

import polars as pl

from trade_analytics.domain.models import Trade
from trade_analytics.domain.normalizer import normalize_trades
from trade_analytics.infrastructure.repositories.base import Repository, RepositoryError

logger = logging.getLogger(__name__)

_READERS = {
    ".csv": pl.read_csv,
    ".parquet": pl.read_parquet,
    ".json": pl.read_json,
}


class TradeRepository(Repository[pl.DataFrame]):
    """Repository for one file of trade rows.

    Example:
        >>> repo = TradeRepository("data/trades/2024.csv")
        >>> trades = repo.get_trades()
        >>> repo.list_symbols()
        ['INFY', 'RELIANCE', 'TCS']
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._cache: pl.DataFrame | None = None
        self._trades: list[Trade] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def get_all(self) -> pl.DataFrame:
        """Load the raw trade frame.

        Raises:
            RepositoryError: If the file is missing, has an unsupported
                suffix, or cannot be parsed
        """
        if self._cache is not None:
            return self._cache

        if not self._path.exists():
            raise RepositoryError("Trade file not found", str(self._path))

        reader = _READERS.get(self._path.suffix.lower())
        if reader is None:
            raise RepositoryError(
                f"Unsupported trade file type: {self._path.suffix or '(none)'}",
                str(self._path),
            )

        try:
            df = reader(self._path)
        except Exception as e:
            raise RepositoryError(f"Failed to read trade data: {e}", str(self._path)) from e

        logger.debug("Loaded %d rows from %s", df.height, self._path)
        self._cache = df
        return df

    def get_rows(self) -> list[dict]:
        """Raw rows as dictionaries."""
        return self.get_all().to_dicts()

    def get_trades(self, drop_zero_gross: bool = False) -> list[Trade]:
        """Normalised trades in file order."""
        if self._trades is None:
            self._trades = normalize_trades(self.get_rows())
        if drop_zero_gross:
            return [t for t in self._trades if t.gross_pnl != 0]
        return list(self._trades)

    def list_symbols(self) -> list[str]:
        """Sorted unique symbols."""
        return sorted({t.symbol for t in self.get_trades()})

    def get_date_range(self) -> tuple[date, date] | None:
        """(first, last) trade date, or None for an empty file."""
        trades = self.get_trades()
        if not trades:
            return None
        dates = [t.trade_date for t in trades]
        return min(dates), max(dates)

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None
        self._trades = None
