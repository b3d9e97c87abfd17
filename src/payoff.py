"""Amortization schedule with annual extra payments."""

import calendar
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List

import pandas as pd

from .config import MONTHS_PER_YEAR
from .mortgage import annuity_payment

logger = logging.getLogger(__name__)


class ReductionPolicy(Enum):
    """What an extra payment buys: a shorter loan or a smaller installment."""

    REDUCE_TERM = "reduce_term"
    REDUCE_INSTALLMENT = "reduce_installment"


@dataclass(frozen=True)
class LoanParameters:
    """Inputs for a single fixed-rate loan."""

    principal: float
    annual_rate: float  # percent, e.g. 3.0 for 3%
    term_years: int
    extra_payment: float = 0.0  # applied once every 12 months
    policy: ReductionPolicy = ReductionPolicy.REDUCE_TERM

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 100 / MONTHS_PER_YEAR

    @property
    def num_payments(self) -> int:
        return self.term_years * MONTHS_PER_YEAR


@dataclass(frozen=True)
class PaymentRecord:
    """One month of the amortization schedule."""

    month: int
    month_name: str
    interest: float
    principal: float
    extra_payment: float
    balance: float
    total_payment: float


@dataclass(frozen=True)
class ScheduleSummary:
    """Totals over the life of a schedule."""

    total_payments: float
    total_interest: float
    total_principal: float
    total_extra: float
    num_payments: int
    first_payment: float
    last_payment: float


def validate_loan_parameters(params: LoanParameters) -> None:
    """Reject inputs the schedule generator is not defined for.

    Raises:
        ValueError: If any parameter is out of range
    """
    if params.principal <= 0:
        raise ValueError(f"Loan amount must be positive, got {params.principal}")
    if params.term_years <= 0:
        raise ValueError(f"Loan term must be a positive number of years, got {params.term_years}")
    if params.annual_rate < 0:
        raise ValueError(f"Interest rate cannot be negative, got {params.annual_rate}")
    if params.extra_payment < 0:
        raise ValueError(f"Extra payment cannot be negative, got {params.extra_payment}")


def _month_name(month: int) -> str:
    return calendar.month_name[(month - 1) % MONTHS_PER_YEAR + 1]


def generate_payment_schedule(params: LoanParameters) -> List[PaymentRecord]:
    """Generate the monthly amortization schedule for a loan.

    The extra payment is applied every twelfth month and never exceeds what
    is left after that month's regular principal. Under REDUCE_TERM the level
    payment is kept and the loan finishes early. Under REDUCE_INSTALLMENT the
    payment is re-amortized over the remaining term once the first year has
    passed, so the schedule runs the full term with smaller installments.

    The schedule stops on the first month the balance reaches zero.

    Args:
        params: Validated loan parameters

    Returns:
        List of PaymentRecord in month order
    """
    monthly_rate = params.monthly_rate
    num_payments = params.num_payments
    payment = annuity_payment(params.principal, monthly_rate, num_payments)
    reduce_installment = (
        params.policy == ReductionPolicy.REDUCE_INSTALLMENT and params.extra_payment > 0
    )

    schedule = []
    balance = params.principal

    for month in range(1, num_payments + 1):
        interest = balance * monthly_rate
        principal = payment - interest
        remaining = balance - principal

        extra = 0.0
        if month % MONTHS_PER_YEAR == 0:
            extra = max(0.0, min(params.extra_payment, remaining))

        # Last scheduled month, an overshoot, or an extra payment covering
        # the rest retires the loan exactly
        if month == num_payments or extra >= remaining:
            principal = balance - extra
            balance = 0.0
        else:
            balance = max(0.0, remaining - extra)

        if reduce_installment and month > MONTHS_PER_YEAR and balance > 0:
            remaining_months = num_payments - month + 1
            payment = annuity_payment(balance, monthly_rate, remaining_months)

        schedule.append(PaymentRecord(
            month=month,
            month_name=_month_name(month),
            interest=interest,
            principal=principal,
            extra_payment=extra,
            balance=balance,
            total_payment=principal + interest + extra,
        ))

        if balance == 0:
            break

    logger.debug(
        "Generated %d of %d scheduled payments (policy=%s, extra=%.2f)",
        len(schedule), num_payments, params.policy.value, params.extra_payment,
    )
    return schedule


def summarize_schedule(schedule: List[PaymentRecord]) -> ScheduleSummary:
    """Sum the flows of a schedule into life-of-loan totals."""
    if not schedule:
        return ScheduleSummary(0.0, 0.0, 0.0, 0.0, 0, 0.0, 0.0)

    return ScheduleSummary(
        total_payments=sum(r.total_payment for r in schedule),
        total_interest=sum(r.interest for r in schedule),
        total_principal=sum(r.principal + r.extra_payment for r in schedule),
        total_extra=sum(r.extra_payment for r in schedule),
        num_payments=len(schedule),
        first_payment=schedule[0].principal + schedule[0].interest,
        last_payment=schedule[-1].principal + schedule[-1].interest,
    )


def schedule_to_dataframe(schedule: List[PaymentRecord]) -> pd.DataFrame:
    """Convert a schedule to a DataFrame with one row per month.

    Columns: month, month_name, interest, principal, extra_payment,
    total_payment, balance, cumulative_interest, cumulative_principal
    """
    columns = [
        'month', 'month_name', 'interest', 'principal',
        'extra_payment', 'total_payment', 'balance',
    ]
    df = pd.DataFrame(
        [
            {
                'month': r.month,
                'month_name': r.month_name,
                'interest': r.interest,
                'principal': r.principal,
                'extra_payment': r.extra_payment,
                'total_payment': r.total_payment,
                'balance': r.balance,
            }
            for r in schedule
        ],
        columns=columns,
    )
    df['cumulative_interest'] = df['interest'].cumsum()
    df['cumulative_principal'] = (df['principal'] + df['extra_payment']).cumsum()
    return df


def compare_reduction_policies(params: LoanParameters) -> pd.DataFrame:
    """Compare the loan without extras against both reduction policies."""
    baseline = summarize_schedule(
        generate_payment_schedule(replace(params, extra_payment=0.0))
    )

    strategies = [('No Extra Payments', baseline)]
    for label, policy in (
        ('Reduce Term', ReductionPolicy.REDUCE_TERM),
        ('Reduce Installment', ReductionPolicy.REDUCE_INSTALLMENT),
    ):
        schedule = generate_payment_schedule(replace(params, policy=policy))
        strategies.append((label, summarize_schedule(schedule)))

    rows = []
    for label, summary in strategies:
        rows.append({
            'strategy': label,
            'term_months': summary.num_payments,
            'total_interest': round(summary.total_interest, 2),
            'interest_saved': round(baseline.total_interest - summary.total_interest, 2),
            'total_extra': round(summary.total_extra, 2),
            'first_payment': round(summary.first_payment, 2),
            'last_payment': round(summary.last_payment, 2),
            'months_saved': baseline.num_payments - summary.num_payments,
        })

    return pd.DataFrame(rows)
