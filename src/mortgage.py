"""Core fixed-rate mortgage formulas."""

from dataclasses import dataclass

from .config import MONTHS_PER_YEAR


def annuity_payment(balance: float, monthly_rate: float, num_payments: int) -> float:
    """Level payment that retires ``balance`` over ``num_payments`` months.

    M = P * [r(1+r)^n] / [(1+r)^n - 1]

    A zero rate falls back to straight-line repayment (P / n).
    """
    if num_payments <= 0:
        return balance

    if monthly_rate == 0:
        return balance / num_payments

    factor = (1 + monthly_rate) ** num_payments
    return balance * (monthly_rate * factor) / (factor - 1)


@dataclass(frozen=True)
class Mortgage:
    """Represents a fixed-rate mortgage."""

    principal: float
    annual_rate: float  # percent, e.g. 3.0 for 3%
    term_years: int

    @property
    def monthly_rate(self) -> float:
        """Convert the annual percentage rate to a monthly decimal rate."""
        return self.annual_rate / 100 / MONTHS_PER_YEAR

    @property
    def num_payments(self) -> int:
        return int(round(self.term_years * MONTHS_PER_YEAR))

    @property
    def monthly_payment(self) -> float:
        return annuity_payment(self.principal, self.monthly_rate, self.num_payments)

    @property
    def total_payment(self) -> float:
        """Total amount paid over the life of the loan."""
        return self.monthly_payment * self.num_payments

    @property
    def total_interest(self) -> float:
        """Total interest paid over the life of the loan."""
        return self.total_payment - self.principal

    def balance_after_years(self, elapsed_years: float) -> float:
        """Outstanding balance after ``elapsed_years`` of scheduled payments.

        B = (M / r) * [1 - (1+r)^-k]
        where k is the number of payments still due
        """
        remaining = (self.term_years - elapsed_years) * MONTHS_PER_YEAR
        if remaining <= 0:
            return 0.0

        r = self.monthly_rate
        if r == 0:
            return self.principal * remaining / self.num_payments

        return (self.monthly_payment / r) * (1 - (1 + r) ** -remaining)


def calculate_monthly_payment(principal: float, annual_rate: float, years: int) -> float:
    """Standalone function for monthly payment calculation."""
    return Mortgage(principal, annual_rate, years).monthly_payment


def calculate_remaining_balance(
    principal: float,
    annual_rate: float,
    years: int,
    elapsed_years: float,
) -> float:
    """Standalone function for the outstanding balance at a year offset."""
    return Mortgage(principal, annual_rate, years).balance_after_years(elapsed_years)
