"""Streamlit table display components."""

import pandas as pd
import streamlit as st

from src.payoff import ScheduleSummary


def _format_money(x: float, decimals: int = 2) -> str:
    return f"{x:,.{decimals}f}"


def display_schedule_totals(summary: ScheduleSummary, principal: float) -> None:
    """Display life-of-loan totals as metrics."""
    st.subheader("Totals")

    col1, col2 = st.columns(2)
    with col1:
        st.metric(
            "Total Payments",
            _format_money(summary.total_payments, 0),
            help="Principal, interest and extra payments over the life of the loan",
        )
        st.metric(
            "Total Interest",
            _format_money(summary.total_interest, 0),
            help="The cost of borrowing",
        )
    with col2:
        st.metric("Total Principal", _format_money(principal))
        st.metric(
            "Total Extra Payments",
            _format_money(summary.total_extra, 0),
            help="Additional payments made toward the principal",
        )

    st.caption(
        f"{summary.num_payments} payments · first installment "
        f"{_format_money(summary.first_payment)} · last installment "
        f"{_format_money(summary.last_payment)}"
    )


def display_payment_schedule_table(data: pd.DataFrame, yearly: bool = True) -> None:
    """Display the payment schedule, monthly or rolled up by year."""
    st.subheader("Payment Schedule")

    display_df = data.copy()
    if yearly:
        display_df['Period'] = display_df['label']
    else:
        display_df['Period'] = display_df.apply(
            lambda row: f"{row['month']} ({row['month_name']})", axis=1
        )

    display_df = display_df.rename(columns={
        'interest': 'Interest',
        'principal': 'Principal',
        'extra_payment': 'Extra Payment',
        'total_payment': 'Total Payment',
        'balance': 'Balance',
    })

    cols_to_show = ['Period', 'Interest', 'Principal', 'Extra Payment', 'Total Payment', 'Balance']
    display_df = display_df[cols_to_show]

    for col in cols_to_show[1:]:
        display_df[col] = display_df[col].apply(_format_money)

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
        height=400,
    )


def display_policy_comparison_table(strategies: pd.DataFrame) -> None:
    """Display the no-extra / reduce term / reduce installment comparison."""
    st.subheader("Extra Payment Policy Comparison")

    display_df = strategies.rename(columns={
        'strategy': 'Strategy',
        'term_months': 'Payoff (Months)',
        'total_interest': 'Total Interest',
        'interest_saved': 'Interest Saved',
        'total_extra': 'Extra Paid',
        'first_payment': 'First Installment',
        'last_payment': 'Last Installment',
        'months_saved': 'Months Saved',
    })

    for col in ['Total Interest', 'Interest Saved', 'Extra Paid', 'First Installment', 'Last Installment']:
        display_df[col] = display_df[col].apply(_format_money)

    display_df['Years Saved'] = (display_df['Months Saved'] / 12).round(1)

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
    )


def display_projection_table(projections: pd.DataFrame, down_payment: float) -> None:
    """Display net worth per strategy at each checkpoint."""
    st.subheader("Projection Details")

    display_df = projections.rename(columns={
        'year': 'Year',
        'scenario1': 'Buying Cash',
        'scenario2': f"Buying (Down Pay: {_format_money(down_payment)} €)",
        'scenario3': 'Keep Renting',
        'house_value': 'House Value',
    })

    for col in display_df.columns[1:]:
        display_df[col] = display_df[col].apply(lambda x: f"{_format_money(x, 0)} €")

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
    )
