"""Plotly chart components for schedule and projection visualization."""

import plotly.graph_objects as go
import pandas as pd


def format_axis_label(value: float) -> str:
    """Abbreviate an axis value with K/M suffixes, keeping its sign."""
    sign = '-' if value < 0 else ''
    magnitude = abs(value)
    if magnitude >= 1_000_000:
        return f"{sign}{magnitude / 1_000_000:.1f}M"
    if magnitude >= 1_000:
        return f"{sign}{magnitude / 1_000:.1f}K"
    return f"{value:.0f}"


def create_payment_chart(data: pd.DataFrame, yearly: bool = True) -> go.Figure:
    """Create bar chart of interest and principal with extra payments alongside.

    Accepts either the monthly schedule DataFrame or the yearly aggregate
    DataFrame; yearly data is labelled by year instead of month number.
    """
    x = data['label'] if yearly else data['month']
    period = 'Year' if yearly else 'Month'

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=x,
        y=data['interest'],
        name='Interest',
        marker_color='#8884d8',
        offsetgroup='regular',
        hovertemplate='%{x}<br>Interest: %{y:,.2f}<extra></extra>',
    ))

    fig.add_trace(go.Bar(
        x=x,
        y=data['principal'],
        name='Principal',
        marker_color='#82ca9d',
        offsetgroup='regular',
        base=data['interest'],
        hovertemplate='%{x}<br>Principal: %{y:,.2f}<extra></extra>',
    ))

    fig.add_trace(go.Bar(
        x=x,
        y=data['extra_payment'],
        name='Extra Payment',
        marker_color='#ffc658',
        offsetgroup='extra',
        hovertemplate='%{x}<br>Extra Payment: %{y:,.2f}<extra></extra>',
    ))

    fig.update_layout(
        title='Payment Chart',
        xaxis_title=period,
        yaxis_title='Amount',
        barmode='group',
        hovermode='x unified',
        xaxis=dict(tickangle=-45),
    )

    return fig


def create_balance_chart(schedule: pd.DataFrame) -> go.Figure:
    """Create remaining balance and cumulative interest chart."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['balance'],
        name='Remaining Balance',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='Month %{x}<br>Balance: %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['cumulative_interest'],
        name='Interest Paid',
        line=dict(color='#d62728', width=2, dash='dash'),
        hovertemplate='Month %{x}<br>Interest Paid: %{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Loan Balance Over Time',
        xaxis_title='Month',
        yaxis_title='Amount',
        hovermode='x unified',
        yaxis=dict(tickformat=',.0f'),
    )

    return fig


def create_net_worth_chart(projections: pd.DataFrame) -> go.Figure:
    """Create line chart comparing net worth of the three strategies."""
    fig = go.Figure()

    series = [
        ('scenario1', 'Buy Cash', '#8884d8'),
        ('scenario2', 'Mortgage', '#82ca9d'),
        ('scenario3', 'Rent', '#ffc658'),
    ]
    for column, name, color in series:
        fig.add_trace(go.Scatter(
            x=projections['year'],
            y=projections[column],
            name=name,
            mode='lines+markers',
            line=dict(color=color, width=2),
            hovertemplate=f'Year %{{x}}<br>{name}: %{{y:,.0f}} €<extra></extra>',
        ))

    tick_values = projections[['scenario1', 'scenario2', 'scenario3']].to_numpy().ravel()
    if len(tick_values):
        low, high = min(0.0, tick_values.min()), tick_values.max()
        ticks = [low + (high - low) * i / 5 for i in range(6)]
        fig.update_yaxes(
            tickvals=ticks,
            ticktext=[f"{format_axis_label(t)} €" for t in ticks],
        )

    fig.update_layout(
        title='Net Worth Projection',
        xaxis_title='Year',
        yaxis_title='Net Worth',
        hovermode='x unified',
    )

    return fig
