"""Yearly roll-up of a monthly amortization schedule."""

from dataclasses import dataclass
from typing import List

import pandas as pd

from .config import MONTHS_PER_YEAR
from .payoff import PaymentRecord


@dataclass(frozen=True)
class YearlyAggregate:
    """Sums over a block of up to 12 payments and the block's closing balance."""

    month: int  # first month of the block
    label: str
    interest: float
    principal: float
    extra_payment: float
    total_payment: float
    balance: float


def aggregate_yearly(schedule: List[PaymentRecord]) -> List[YearlyAggregate]:
    """Group a monthly schedule into consecutive 12-month blocks.

    Payment flows are summed; the balance is a stock, so each block keeps
    the balance of its last month. A schedule that ends mid-year produces a
    shorter final block.
    """
    yearly = []

    for start in range(0, len(schedule), MONTHS_PER_YEAR):
        block = schedule[start:start + MONTHS_PER_YEAR]
        first_month = block[0].month

        yearly.append(YearlyAggregate(
            month=first_month,
            label=f"Year {first_month // MONTHS_PER_YEAR + 1}",
            interest=sum(r.interest for r in block),
            principal=sum(r.principal for r in block),
            extra_payment=sum(r.extra_payment for r in block),
            total_payment=sum(r.total_payment for r in block),
            balance=block[-1].balance,
        ))

    return yearly


def yearly_to_dataframe(yearly: List[YearlyAggregate]) -> pd.DataFrame:
    """Convert yearly aggregates to a DataFrame."""
    columns = ['month', 'label', 'interest', 'principal', 'extra_payment', 'total_payment', 'balance']
    return pd.DataFrame(
        [
            {
                'month': y.month,
                'label': y.label,
                'interest': y.interest,
                'principal': y.principal,
                'extra_payment': y.extra_payment,
                'total_payment': y.total_payment,
                'balance': y.balance,
            }
            for y in yearly
        ],
        columns=columns,
    )
