"""Tests for the rent vs buy net worth projection."""

from dataclasses import replace

import pytest
from src.config import DEFAULT_PROJECTION
from src.growth import calculate_compound_growth
from src.mortgage import calculate_monthly_payment, calculate_remaining_balance
from src.projection import (
    ProjectionParameters,
    project_net_worth,
    projection_years,
    projections_to_dataframe,
    validate_projection_parameters,
)


def _params(**overrides):
    values = dict(DEFAULT_PROJECTION)
    values.update(overrides)
    return ProjectionParameters(**values)


class TestProjectionYears:
    """Tests for checkpoint generation."""

    def test_multiple_of_five(self):
        """Test checkpoints for a 30-year mortgage."""
        assert projection_years(30) == [0, 5, 10, 15, 20, 25, 30]

    def test_rounds_up(self):
        """Test that the horizon rounds up to the next 5-year boundary."""
        assert projection_years(32) == [0, 5, 10, 15, 20, 25, 30, 35]
        assert projection_years(1) == [0, 5]


class TestProjectionParameters:
    """Tests for derived parameter values."""

    def test_down_payment_and_mortgage(self):
        """Test down payment split."""
        params = _params()

        assert params.down_payment == pytest.approx(40000)
        assert params.mortgage_amount == pytest.approx(160000)

    def test_full_down_payment(self):
        """Test that a 100% down payment leaves no mortgage."""
        assert _params(down_payment_percentage=100).mortgage_amount == 0.0

    def test_monthly_ownership_costs(self):
        """Test monthly tax, insurance and maintenance."""
        params = _params(property_tax_rate=1.2, home_insurance=1200, maintenance_rate=1.0)

        # 200k * 1.2% / 12 + 1200 / 12 + 200k * 1% / 12
        assert params.monthly_ownership_costs == pytest.approx(200 + 100 + 166.6666667)


class TestProjectNetWorth:
    """Tests for project_net_worth."""

    def test_checkpoints(self):
        """Test one point per checkpoint in year order."""
        projections = project_net_worth(_params())

        assert [p.year for p in projections] == [0, 5, 10, 15, 20, 25, 30]

    def test_year_zero_baseline(self):
        """Test that no strategy has gained or lost anything at year 0."""
        first = project_net_worth(_params())[0]

        assert first.scenario1 == pytest.approx(300000)
        assert first.scenario2 == pytest.approx(300000)
        assert first.scenario3 == pytest.approx(300000)
        assert first.house_value == pytest.approx(200000)

    def test_house_appreciation(self):
        """Test house value compounding annually."""
        projections = project_net_worth(_params(house_appreciation=2.0))

        assert projections[2].house_value == pytest.approx(200000 * 1.02 ** 10)

    def test_cash_scenario(self):
        """Test scenario 1 against the formulas directly."""
        params = _params()
        point = project_net_worth(params)[1]

        expected = calculate_compound_growth(
            100000, 2500 - params.monthly_ownership_costs, 5.0, 5,
        ) + 200000 * 1.005 ** 5
        assert point.scenario1 == pytest.approx(expected)

    def test_mortgage_scenario_subtracts_balance(self):
        """Test scenario 2 subtracts the outstanding mortgage."""
        params = _params()
        point = project_net_worth(params)[2]

        balance = calculate_remaining_balance(160000, 2.7, 30, 10)
        assert balance > 0
        assert point.scenario2 < calculate_compound_growth(
            300000 - 40000, 2500, 5.0, 10,
        ) + point.house_value - balance

    def test_mortgage_scenario(self):
        """Test scenario 2 against the formulas directly."""
        params = _params()
        point = project_net_worth(params)[2]

        # Savings minus mortgage payment and ownership costs are invested
        monthly_outflow = calculate_monthly_payment(160000, 2.7, 30) + params.monthly_ownership_costs
        expected = (
            calculate_compound_growth(260000, 2500 - monthly_outflow, 5.0, 10)
            + 200000 * 1.005 ** 10
            - calculate_remaining_balance(160000, 2.7, 30, 10)
        )
        assert point.scenario2 == pytest.approx(expected)

    def test_mortgage_paid_off_at_term(self):
        """Test that no balance remains at the end of the mortgage."""
        params = _params(investment_return=0.0, house_appreciation=0.0, property_tax_rate=0.0,
                         home_insurance=0.0, maintenance_rate=0.0, mortgage_rate=0.0)
        last = project_net_worth(params)[-1]

        # Zero rates: savings minus linear mortgage payments for 30 years
        monthly_mortgage = 160000 / 360
        expected = 260000 + (2500 - monthly_mortgage) * 360 + 200000
        assert last.scenario2 == pytest.approx(expected)

    def test_rent_scenario(self):
        """Test scenario 3 with rent indexed to the checkpoint year."""
        params = _params()
        point = project_net_worth(params)[3]

        rent = 750 * 1.005 ** 15
        expected = calculate_compound_growth(300000, 2500 - rent, 5.0, 15)
        assert point.scenario3 == pytest.approx(expected)

    def test_recomputed_from_start(self):
        """Test that a checkpoint does not depend on the other checkpoints."""
        long_term = project_net_worth(_params(mortgage_years=30))
        short_term = project_net_worth(_params(mortgage_years=10))

        # Rent scenario is independent of the mortgage horizon
        assert long_term[1].scenario3 == short_term[1].scenario3

    def test_dataframe(self):
        """Test DataFrame conversion."""
        df = projections_to_dataframe(project_net_worth(_params()))

        assert list(df.columns) == ['year', 'scenario1', 'scenario2', 'scenario3', 'house_value']
        assert len(df) == 7


class TestValidateProjectionParameters:
    """Tests for caller-side validation."""

    def test_defaults_valid(self):
        """Test that the defaults pass validation."""
        validate_projection_parameters(_params())

    def test_negative_return_allowed(self):
        """Test that returns and appreciation may be negative."""
        validate_projection_parameters(_params(investment_return=-2.0, house_appreciation=-1.0))

    @pytest.mark.parametrize("overrides, message", [
        ({'house_value': -1.0}, "house_value"),
        ({'monthly_rent': -750.0}, "monthly_rent"),
        ({'mortgage_years': 0}, "mortgage_years"),
        ({'down_payment_percentage': 120.0}, "down_payment_percentage"),
    ])
    def test_invalid(self, overrides, message):
        """Test that out-of-range inputs raise ValueError."""
        with pytest.raises(ValueError, match=message):
            validate_projection_parameters(replace(_params(), **overrides))
