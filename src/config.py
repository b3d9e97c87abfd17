"""Application defaults and runtime configuration."""

import os

MONTHS_PER_YEAR = 12
PROJECTION_INTERVAL_YEARS = 5

# Logging
LOG_LEVEL = os.environ.get("MORTGAGE_EXPLORER_LOG_LEVEL", "WARNING").upper()

# Mortgage calculator form defaults
DEFAULT_LOAN = {
    'principal': 200000.0,
    'annual_rate': 3.0,  # percent
    'term_years': 30,
    'extra_payment': 1000.0,  # once per year
    'reduce_installment': True,
}

# Rent vs buy form defaults
DEFAULT_PROJECTION = {
    'initial_investment': 300000.0,
    'house_value': 200000.0,
    'monthly_savings': 2500.0,
    'investment_return': 5.0,
    'house_appreciation': 0.5,
    'mortgage_rate': 2.7,
    'mortgage_years': 30,
    'monthly_rent': 750.0,
    'rent_increase': 0.5,
    'property_tax_rate': 0.0,
    'home_insurance': 1000.0,
    'maintenance_rate': 1.0,
    'down_payment_percentage': 20.0,
}
