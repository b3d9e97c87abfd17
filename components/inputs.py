"""Streamlit input components for loan and projection parameters."""

import streamlit as st

from src.config import DEFAULT_LOAN, DEFAULT_PROJECTION
from src.payoff import LoanParameters, ReductionPolicy
from src.projection import ProjectionParameters

# Form labels and step sizes for the rent vs buy inputs, in display order
PROJECTION_PARAM_LABELS = {
    'initial_investment': "Initial Investments",
    'house_value': "House Value",
    'monthly_savings': "Monthly Savings",
    'investment_return': "Investments Return (year %)",
    'house_appreciation': "House Appreciation (year %)",
    'mortgage_rate': "Mortgage Rate (fixed %)",
    'mortgage_years': "Mortgage Years",
    'monthly_rent': "Monthly Rent",
    'rent_increase': "Rent Increase (year %)",
    'property_tax_rate': "Property Tax Rate (%)",
    'home_insurance': "Home Insurance (Annual)",
    'maintenance_rate': "Maintenance Rate (year %)",
    'down_payment_percentage': "House Down Payment (%)",
}

PROJECTION_PARAM_STEPS = {
    'initial_investment': 5000.0,
    'house_value': 5000.0,
    'monthly_savings': 500.0,
    'investment_return': 0.5,
    'house_appreciation': 0.25,
    'mortgage_rate': 0.1,
    'mortgage_years': 5,
    'monthly_rent': 50.0,
    'rent_increase': 0.25,
    'property_tax_rate': 0.1,
    'home_insurance': 50.0,
    'maintenance_rate': 0.25,
    'down_payment_percentage': 5.0,
}

# Returns and appreciation can be negative
_SIGNED_PARAMS = {'investment_return', 'house_appreciation'}


def loan_input_form(key_prefix: str = "loan") -> LoanParameters:
    """Create input form for the loan and its annual extra payment."""
    col1, col2 = st.columns(2)

    with col1:
        principal = st.number_input(
            "Loan Amount",
            min_value=1000.0,
            value=DEFAULT_LOAN['principal'],
            step=5000.0,
            format="%.2f",
            key=f"{key_prefix}_principal",
            help="The total amount of money you're borrowing from the lender to purchase your home.",
        )

        annual_rate = st.number_input(
            "Interest Rate (%)",
            min_value=0.0,
            max_value=100.0,
            value=DEFAULT_LOAN['annual_rate'],
            step=0.1,
            format="%.2f",
            key=f"{key_prefix}_rate",
            help="The annual interest rate on your mortgage, expressed as a percentage.",
        )

    with col2:
        term_years = st.number_input(
            "Loan Term (years)",
            min_value=1,
            max_value=100,
            value=DEFAULT_LOAN['term_years'],
            step=1,
            key=f"{key_prefix}_term",
            help="The length of time you have to repay the loan in full.",
        )

        extra_payment = st.number_input(
            "Additional Annual Payment",
            min_value=0.0,
            value=DEFAULT_LOAN['extra_payment'],
            step=1000.0,
            format="%.2f",
            key=f"{key_prefix}_extra",
            help="Extra money paid toward the principal once per year.",
        )

    policy = ReductionPolicy.REDUCE_TERM
    if extra_payment > 0:
        choice = st.radio(
            "Apply extra payments to",
            options=["Reduce Term", "Reduce Installments amount"],
            index=1 if DEFAULT_LOAN['reduce_installment'] else 0,
            horizontal=True,
            key=f"{key_prefix}_policy",
            help=(
                '"Reduce Term" keeps your monthly payment the same but shortens the loan. '
                '"Reduce Installments" lowers your monthly payments while keeping the original term.'
            ),
        )
        if choice == "Reduce Installments amount":
            policy = ReductionPolicy.REDUCE_INSTALLMENT

    return LoanParameters(
        principal=principal,
        annual_rate=annual_rate,
        term_years=int(term_years),
        extra_payment=extra_payment,
        policy=policy,
    )


def projection_input_form(key_prefix: str = "projection") -> ProjectionParameters:
    """Create the rent vs buy input grid."""
    values = {}
    columns = st.columns(3)

    for i, (name, label) in enumerate(PROJECTION_PARAM_LABELS.items()):
        with columns[i % 3]:
            if name == 'mortgage_years':
                values[name] = st.number_input(
                    label,
                    min_value=1,
                    max_value=100,
                    value=DEFAULT_PROJECTION[name],
                    step=PROJECTION_PARAM_STEPS[name],
                    key=f"{key_prefix}_{name}",
                )
            else:
                values[name] = st.number_input(
                    label,
                    min_value=None if name in _SIGNED_PARAMS else 0.0,
                    max_value=100.0 if name == 'down_payment_percentage' else None,
                    value=float(DEFAULT_PROJECTION[name]),
                    step=PROJECTION_PARAM_STEPS[name],
                    key=f"{key_prefix}_{name}",
                )

    return ProjectionParameters(**values)
