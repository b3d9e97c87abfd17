"""Compound growth of invested savings."""

from .config import MONTHS_PER_YEAR


def calculate_compound_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: float,
) -> float:
    """Grow an investment month by month with a constant net contribution.

    Each month the balance earns interest first and the contribution is
    added afterwards, so the final contribution does not compound.

    Args:
        principal: Starting balance (may be negative)
        monthly_contribution: Net amount added each month (may be negative)
        annual_rate: Annual return as a percentage
        years: Length of the horizon in years

    Returns:
        Balance at the end of the horizon
    """
    total = principal
    monthly_rate = annual_rate / MONTHS_PER_YEAR / 100

    for _ in range(int(round(years * MONTHS_PER_YEAR))):
        total = total * (1 + monthly_rate)
        total += monthly_contribution

    return total
