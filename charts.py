from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from formatting import money
from scenario import CalculationResult, SipComparison

# charts.py - Plotly chart builders for the calculator page

COLORS = ["#1FB8CD", "#FFC185", "#B4413C", "#5D878F"]
MARGIN = dict(l=40, r=30, t=60, b=40)


# Principal vs. gains split of the maturity amount.
def allocation_pie_chart(result: CalculationResult) -> go.Figure:
    gains = result.estimated_gains
    title = "Investment vs. Returns"
    if gains < 0:
        title += f" (loss of {money(-gains)})"
    fig = go.Figure(
        data=[
            go.Pie(
                labels=["Initial Investment", "Estimated Gains"],
                values=[result.initial_investment, max(gains, 0.0)],
                hole=0.4,
                sort=False,
                marker=dict(colors=COLORS[:2]),
            )
        ]
    )
    fig.update_layout(title=title, margin=MARGIN)
    return fig


# Balance by year from a growth_curve() frame.
def growth_line_chart(curve: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    if curve is None or curve.empty:
        return fig.update_layout(title="No projection to display")
    fig.add_trace(
        go.Scatter(
            x=curve["Year"],
            y=curve["Balance"],
            mode="lines+markers",
            name="Wealth Growth",
            fill="tozeroy",
            line=dict(color=COLORS[0]),
            hovertext=[money(v) for v in curve["Balance"]],
            hoverinfo="x+text",
        )
    )
    fig.update_layout(
        title="Wealth Growth Over Time",
        xaxis_title="Year",
        yaxis_title="Balance",
        hovermode="x unified",
        margin=MARGIN,
    )
    return fig


def comparison_bar_chart(comparison: SipComparison) -> go.Figure:
    values = [comparison.lumpsum_maturity, comparison.sip_maturity]
    fig = go.Figure(
        data=[
            go.Bar(
                x=["Lumpsum", "Monthly SIP"],
                y=values,
                text=[money(v) for v in values],
                textposition="auto",
                marker=dict(color=[COLORS[0], COLORS[1]]),
            )
        ]
    )
    fig.update_layout(
        title="Lumpsum vs. SIP at Maturity",
        yaxis_title="Maturity Amount",
        margin=MARGIN,
    )
    return fig
