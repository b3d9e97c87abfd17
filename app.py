"""Mortgage Explorer - Streamlit Application."""

import logging

import streamlit as st

from components.charts import (
    create_balance_chart,
    create_net_worth_chart,
    create_payment_chart,
)
from components.inputs import loan_input_form, projection_input_form
from components.tables import (
    display_payment_schedule_table,
    display_policy_comparison_table,
    display_projection_table,
    display_schedule_totals,
)
from src.aggregation import aggregate_yearly, yearly_to_dataframe
from src.config import LOG_LEVEL
from src.mortgage import calculate_monthly_payment
from src.payoff import (
    compare_reduction_policies,
    generate_payment_schedule,
    schedule_to_dataframe,
    summarize_schedule,
    validate_loan_parameters,
)
from src.projection import (
    project_net_worth,
    projections_to_dataframe,
    validate_projection_parameters,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Mortgage Explorer",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded",
)


def main():
    """Main application entry point."""
    st.title("🏠 Mortgage Explorer")
    st.markdown("*Explore how a loan amortizes and how buying compares to renting*")

    st.sidebar.title("Navigation")
    page = st.sidebar.radio(
        "Select Tool",
        options=["Mortgage Calculator", "Rent vs Buy"],
    )

    st.sidebar.divider()

    st.sidebar.markdown("### Quick Reference")
    with st.sidebar.expander("Reduce Term vs Reduce Installment"):
        st.markdown("""
        **Reduce Term** keeps the monthly payment unchanged, so every extra payment shortens the loan.

        **Reduce Installment** keeps the original term and recalculates a lower monthly payment after each extra payment.
        """)
    with st.sidebar.expander("Net Worth Scenarios"):
        st.markdown("""
        - **Buy Cash**: pay the full house price from your investments
        - **Mortgage**: pay the down payment and finance the rest
        - **Rent**: keep everything invested and pay rent
        """)

    if page == "Mortgage Calculator":
        mortgage_calculator_page()
    elif page == "Rent vs Buy":
        rent_vs_buy_page()


def mortgage_calculator_page():
    """Amortization schedule with an annual extra payment."""
    st.header("Mortgage Calculator")

    params = loan_input_form()

    try:
        validate_loan_parameters(params)
    except ValueError as e:
        st.error(str(e))
        return

    schedule = generate_payment_schedule(params)
    summary = summarize_schedule(schedule)
    schedule_df = schedule_to_dataframe(schedule)

    col1, col2 = st.columns([1, 2])

    with col1:
        st.metric(
            "Initial Monthly Payment",
            f"{calculate_monthly_payment(params.principal, params.annual_rate, params.term_years):,.2f}",
        )
        display_schedule_totals(summary, params.principal)

    with col2:
        show_yearly = st.toggle("Show yearly sums", value=True)
        if show_yearly:
            chart_df = yearly_to_dataframe(aggregate_yearly(schedule))
        else:
            chart_df = schedule_df

        tab1, tab2, tab3 = st.tabs(["Payment Chart", "Balance Chart", "Policy Comparison"])

        with tab1:
            st.plotly_chart(create_payment_chart(chart_df, yearly=show_yearly), use_container_width=True)

        with tab2:
            st.plotly_chart(create_balance_chart(schedule_df), use_container_width=True)

        with tab3:
            if params.extra_payment > 0:
                display_policy_comparison_table(compare_reduction_policies(params))
            else:
                st.info("Enter an additional annual payment to compare policies.")

    display_payment_schedule_table(chart_df, yearly=show_yearly)

    csv = schedule_df.to_csv(index=False)
    st.download_button(
        "Download Schedule (CSV)",
        csv,
        "amortization_schedule.csv",
        "text/csv",
    )


def rent_vs_buy_page():
    """Net worth projection across cash purchase, mortgage and renting."""
    st.header("Rent vs Buy")

    params = projection_input_form()

    try:
        validate_projection_parameters(params)
    except ValueError as e:
        st.error(str(e))
        return

    projections = projections_to_dataframe(project_net_worth(params))
    logger.debug("Projected %d checkpoints", len(projections))

    display_projection_table(projections, params.down_payment)

    st.subheader("Net Worth Projection Chart")
    st.plotly_chart(create_net_worth_chart(projections), use_container_width=True)


if __name__ == "__main__":
    main()
