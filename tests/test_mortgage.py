"""Tests for core mortgage formulas."""

import pytest
from src.mortgage import (
    Mortgage,
    annuity_payment,
    calculate_monthly_payment,
    calculate_remaining_balance,
)


class TestAnnuityPayment:
    """Tests for the level payment formula."""

    def test_standard_payment(self):
        """Test $200,000 at 3% for 30 years."""
        payment = annuity_payment(200000, 0.03 / 12, 360)

        # Expected: ~$843.21
        assert abs(payment - 843.21) < 0.01

    def test_zero_rate(self):
        """Test that a zero rate repays the principal in equal parts."""
        assert annuity_payment(120000, 0.0, 120) == 1000.0

    def test_no_payments_left(self):
        """Test that with no months left the whole balance is due."""
        assert annuity_payment(5000, 0.01, 0) == 5000


class TestMortgage:
    """Tests for Mortgage class."""

    def test_monthly_payment_calculation(self):
        """Test standard amortization formula with a percentage rate."""
        # $300,000 at 6.5% for 30 years
        mortgage = Mortgage(principal=300000, annual_rate=6.5, term_years=30)

        # Expected: ~$1,896.20
        assert abs(mortgage.monthly_payment - 1896.20) < 0.10

    def test_monthly_rate(self):
        """Test percentage to monthly decimal conversion."""
        mortgage = Mortgage(principal=100000, annual_rate=6.0, term_years=30)
        assert mortgage.monthly_rate == pytest.approx(0.005)
        assert mortgage.num_payments == 360

    def test_total_interest(self):
        """Test total interest calculation."""
        mortgage = Mortgage(principal=200000, annual_rate=3.0, term_years=30)

        # Exact annuity total is ~103,554.90; see "Example totals" in DESIGN.md
        assert abs(mortgage.total_interest - 103554.62) < 1.0
        assert mortgage.total_payment == pytest.approx(mortgage.total_interest + 200000)

    def test_balance_after_years(self):
        """Test remaining balance calculation."""
        mortgage = Mortgage(principal=300000, annual_rate=6.5, term_years=30)

        # No payments made yet
        assert mortgage.balance_after_years(0) == pytest.approx(300000)

        # Paid off at (and after) the end of the term
        assert mortgage.balance_after_years(30) == 0.0
        assert mortgage.balance_after_years(35) == 0.0

        # Balance should decrease over time
        assert mortgage.balance_after_years(5) > mortgage.balance_after_years(10)

    def test_balance_after_years_zero_rate(self):
        """Test that a zero-rate balance falls linearly."""
        mortgage = Mortgage(principal=120000, annual_rate=0.0, term_years=10)

        assert mortgage.balance_after_years(5) == pytest.approx(60000)


class TestStandaloneFunctions:
    """Tests for standalone formula helpers."""

    def test_payment_matches_mortgage_class(self):
        """Test that standalone function matches class property."""
        standalone = calculate_monthly_payment(250000, 7.0, 30)
        mortgage = Mortgage(250000, 7.0, 30)

        assert standalone == mortgage.monthly_payment

    def test_remaining_balance_matches_mortgage_class(self):
        """Test that standalone balance matches class method."""
        standalone = calculate_remaining_balance(160000, 2.7, 30, 10)
        mortgage = Mortgage(160000, 2.7, 30)

        assert standalone == mortgage.balance_after_years(10)

    def test_remaining_balance_zero_principal(self):
        """Test that a fully paid-down house carries no mortgage balance."""
        assert calculate_remaining_balance(0, 2.7, 30, 5) == 0.0
