"""
CoachMVP — Dashboard charts and number formatting.
"""
import pandas as pd
import plotly.graph_objects as go

from coach_mvp.config import CHART_COLORS

PL = dict(
    template="plotly_dark", paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Space Grotesk", color="#e2e8f0"), margin=dict(l=40, r=20, t=40, b=40),
)

NBSP = "\u00a0"


def fmt_number(value) -> str:
    """fr-CA style, at most one decimal: 2125 → '2 125', 14.1666 → '14,2'."""
    text = f"{round(float(value), 1):,.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return text.replace(",", NBSP).replace(".", ",")


def sort_weeks(weekly: pd.DataFrame) -> pd.DataFrame:
    """Chronological order for display; the aggregator keeps first-seen order."""
    if weekly.empty:
        return weekly
    return weekly.sort_values("week", kind="stable").reset_index(drop=True)


def weekly_volume_chart(weekly: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=weekly["week"], y=weekly["volume_kg"], name="Volume (kg)",
        marker_color=CHART_COLORS["volume"],
        text=weekly["volume_kg"].apply(fmt_number), textposition="outside",
    ))
    fig.update_layout(**PL, yaxis_title="Volume (kg)", showlegend=False, height=320)
    return fig


def intensity_chart(weekly: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=weekly["week"], y=weekly["avg_intensity"], name="Intensité (0-1)",
        mode="lines+markers", line=dict(color=CHART_COLORS["intensity"], width=3),
        marker=dict(size=9),
    ))
    fig.update_layout(**PL, yaxis=dict(range=[0, 1]), showlegend=False, height=320)
    return fig


def duration_chart(weekly: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=weekly["week"], y=weekly["duration_min"], name="Durée (min)",
        mode="lines+markers", line=dict(color=CHART_COLORS["duration"], width=3),
        marker=dict(size=9),
    ))
    fig.update_layout(**PL, yaxis_title="Durée (min)", showlegend=False, height=320)
    return fig
