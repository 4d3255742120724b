"""Analysis Settings: Parameters for the metrics calculator.

Lives in the domain layer so metrics never import infrastructure.
infrastructure.config re-exports AnalysisConfig next to DataPaths.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for the metrics calculator.

    Attributes:
        annualization_factor: Trading days per year for Sharpe/Sortino/Calmar
        omega_threshold: Return threshold for the Omega ratio
        ratio_cap: Sentinel for ratios with no losing side (profit factor, omega)
        kelly_bounds: Clamp range for the Kelly percentage
        starting_capital: Capital base for return percentages (0 = use peak P&L)
        precision: Decimal places for money and ratio fields
        drop_zero_gross: Skip zero gross P&L rows when normalising
        top_n: Number of top winners/losers to list
        symbol_top_n: Number of symbols in the symbol table
    """

    annualization_factor: int = 252
    omega_threshold: float = 0.0
    ratio_cap: float = 999.0
    kelly_bounds: tuple[float, float] = (-100.0, 100.0)
    starting_capital: float = 0.0
    precision: int = 2
    drop_zero_gross: bool = False
    top_n: int = 5
    symbol_top_n: int = 10


DEFAULT_CONFIG = AnalysisConfig()
