"""Net worth projection: buy with cash, buy with a mortgage, or keep renting."""

import logging
import math
from dataclasses import dataclass
from typing import List

import numpy as np
import pandas as pd

from .config import MONTHS_PER_YEAR, PROJECTION_INTERVAL_YEARS
from .growth import calculate_compound_growth
from .mortgage import calculate_monthly_payment, calculate_remaining_balance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionParameters:
    """Inputs shared by the three strategies. Rates are percentages."""

    initial_investment: float
    house_value: float
    monthly_savings: float
    investment_return: float
    house_appreciation: float
    mortgage_rate: float
    mortgage_years: float
    monthly_rent: float
    rent_increase: float
    property_tax_rate: float
    home_insurance: float  # annual
    maintenance_rate: float
    down_payment_percentage: float

    @property
    def down_payment(self) -> float:
        return self.house_value * self.down_payment_percentage / 100

    @property
    def mortgage_amount(self) -> float:
        return max(0.0, self.house_value - self.down_payment)

    @property
    def monthly_ownership_costs(self) -> float:
        """Property tax, insurance and maintenance as a monthly amount."""
        return (
            self.house_value * self.property_tax_rate / 100 / MONTHS_PER_YEAR
            + self.home_insurance / MONTHS_PER_YEAR
            + self.house_value * self.maintenance_rate / 100 / MONTHS_PER_YEAR
        )


@dataclass(frozen=True)
class ProjectionPoint:
    """Net worth of each strategy at one checkpoint."""

    year: int
    scenario1: float  # buy with cash
    scenario2: float  # buy with a mortgage
    scenario3: float  # rent and invest
    house_value: float


def validate_projection_parameters(params: ProjectionParameters) -> None:
    """Reject inputs the projection is not defined for.

    Investment return and house appreciation may be negative; every other
    amount and rate must be non-negative.

    Raises:
        ValueError: If any parameter is out of range
    """
    non_negative = [
        'initial_investment', 'house_value', 'monthly_savings', 'mortgage_rate',
        'monthly_rent', 'rent_increase', 'property_tax_rate', 'home_insurance',
        'maintenance_rate',
    ]
    for name in non_negative:
        value = getattr(params, name)
        if value < 0:
            raise ValueError(f"{name} cannot be negative, got {value}")

    if params.mortgage_years <= 0:
        raise ValueError(f"mortgage_years must be positive, got {params.mortgage_years}")

    if not 0 <= params.down_payment_percentage <= 100:
        raise ValueError(
            f"down_payment_percentage must be between 0 and 100, got {params.down_payment_percentage}"
        )


def projection_years(mortgage_years: float) -> List[int]:
    """Checkpoints 0, 5, 10, ... up to the term rounded up to a multiple of 5."""
    intervals = math.ceil(mortgage_years / PROJECTION_INTERVAL_YEARS)
    return [int(y) for y in np.arange(intervals + 1) * PROJECTION_INTERVAL_YEARS]


def project_net_worth(params: ProjectionParameters) -> List[ProjectionPoint]:
    """Project net worth for each strategy at every checkpoint.

    Each checkpoint is computed from today's parameters over ``year`` years;
    nothing is carried forward from the previous checkpoint. All strategies
    grow their liquid savings at the same investment return.

    Args:
        params: Validated projection parameters

    Returns:
        List of ProjectionPoint ordered by year
    """
    ownership_costs = params.monthly_ownership_costs
    down_payment = params.down_payment
    mortgage_amount = params.mortgage_amount

    monthly_mortgage = 0.0
    if mortgage_amount > 0:
        monthly_mortgage = calculate_monthly_payment(
            mortgage_amount, params.mortgage_rate, params.mortgage_years,
        )

    projections = []

    for year in projection_years(params.mortgage_years):
        house_value = params.house_value * (1 + params.house_appreciation / 100) ** year

        # Scenario 1: buy the house outright
        investment_cash = calculate_compound_growth(
            params.initial_investment - params.house_value,
            params.monthly_savings - ownership_costs,
            params.investment_return,
            year,
        )

        # Scenario 2: put the down payment in and finance the rest
        investment_mortgage = calculate_compound_growth(
            params.initial_investment - down_payment,
            params.monthly_savings - (monthly_mortgage + ownership_costs),
            params.investment_return,
            year,
        )
        mortgage_balance = calculate_remaining_balance(
            mortgage_amount, params.mortgage_rate, params.mortgage_years, year,
        )
        logger.debug(
            "Year %d: monthly mortgage %.2f, outstanding balance %.2f",
            year, monthly_mortgage, mortgage_balance,
        )

        # Scenario 3: keep renting and invest everything
        monthly_rent = params.monthly_rent * (1 + params.rent_increase / 100) ** year
        investment_rent = calculate_compound_growth(
            params.initial_investment,
            params.monthly_savings - monthly_rent,
            params.investment_return,
            year,
        )

        projections.append(ProjectionPoint(
            year=year,
            scenario1=investment_cash + house_value,
            scenario2=investment_mortgage + house_value - mortgage_balance,
            scenario3=investment_rent,
            house_value=house_value,
        ))

    return projections


def projections_to_dataframe(projections: List[ProjectionPoint]) -> pd.DataFrame:
    """Convert projection points to a DataFrame."""
    columns = ['year', 'scenario1', 'scenario2', 'scenario3', 'house_value']
    return pd.DataFrame(
        [
            {
                'year': p.year,
                'scenario1': p.scenario1,
                'scenario2': p.scenario2,
                'scenario3': p.scenario3,
                'house_value': p.house_value,
            }
            for p in projections
        ],
        columns=columns,
    )
