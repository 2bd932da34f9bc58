"""
Monte Carlo Portfolio Projection Dashboard
==========================================

Sidebar inputs describe one portfolio; each run simulates N independent paths
of normally distributed yearly returns and shows:
  1. KPIs:        median, goal probability, 90% interval
  2. Distribution: histogram of final values with goal / interval markers
  3. Paths:        fan chart of a handful of simulated paths vs the deterministic line

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import CONFIDENCE_LEVEL, DEFAULT_PORTFOLIO, PortfolioConfig
from core.errors import ProjectionError

from data_prep.validators import validate_config

from engine.cashflow import deterministic_value
from engine.runner import build_sampler, run_paths, run_trials

from pm.aggregator import percentile_table, summarize_sample
from pm.report import report_table

MAX_FAN_PATHS = 50


# ---------------------------------------------------------------------------
# Cached simulation
# ---------------------------------------------------------------------------
@st.cache_data(show_spinner=False)
def _simulate(config: PortfolioConfig) -> np.ndarray:
    return run_trials(config)


@st.cache_data(show_spinner=False)
def _simulate_paths(config: PortfolioConfig, n_paths: int) -> pd.DataFrame:
    return run_paths(config, n_paths=n_paths)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format money with commas."""
    return f"{val:,.2f}"


def _plot_histogram(sample, result, *, bins=60, height=360):
    fig = go.Figure(go.Histogram(x=sample, nbinsx=bins, opacity=0.8, name="Final value"))
    lower, upper = result.confidence_interval
    fig.add_vline(x=result.goal, line_dash="dash", line_color="firebrick",
                  annotation_text="Goal", annotation_position="top")
    fig.add_vline(x=result.median_value, line_color="black",
                  annotation_text="Median", annotation_position="top left")
    fig.add_vrect(x0=lower, x1=upper, fillcolor="steelblue", opacity=0.12, line_width=0,
                  annotation_text=f"{result.confidence_level:.0%} interval",
                  annotation_position="bottom left")
    fig.update_layout(
        title="Distribution of Final Portfolio Values",
        xaxis_title="Final value",
        yaxis_title="Paths",
        height=height,
        showlegend=False,
    )
    st.plotly_chart(fig, use_container_width=True)


def _plot_fan(paths: pd.DataFrame, config: PortfolioConfig, *, height=360):
    fig = go.Figure()
    for _, grp in paths.groupby("path_id"):
        fig.add_trace(go.Scatter(
            x=grp["year"], y=grp["value"], mode="lines",
            line=dict(width=1, color="steelblue"), opacity=0.25, hoverinfo="skip",
        ))
    years = np.arange(config.years + 1)
    expected = [deterministic_value(config.replace(years=int(k))) for k in years]
    fig.add_trace(go.Scatter(
        x=years, y=expected, mode="lines", name="Expected return",
        line=dict(width=3, color="black"),
    ))
    fig.add_hline(y=config.goal, line_dash="dash", line_color="firebrick")
    fig.update_layout(
        title="Simulated Paths",
        xaxis_title="Year",
        yaxis_title="Portfolio value",
        height=height,
        showlegend=False,
    )
    st.plotly_chart(fig, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Monte Carlo Projection", layout="wide")
st.title("Monte Carlo Portfolio Projection")
st.caption("Normal yearly returns, year-end contributions, N independent paths.")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Portfolio inputs
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Portfolio")
    d = DEFAULT_PORTFOLIO
    initial_investment = st.number_input("Initial investment", value=d.initial_investment, step=100.0)
    monthly_contributions = st.number_input(
        "Monthly contribution (negative = withdrawal)", value=d.monthly_contributions, step=10.0,
    )
    expected_pct = st.slider("Expected yearly return (%)", -20.0, 30.0,
                             d.expected_yearly_return * 100, 0.5)
    volatility_pct = st.slider("Volatility (%)", 0.0, 60.0, d.volatility * 100, 0.5)
    years = st.number_input("Years", min_value=0, max_value=100, value=d.years, step=1)
    goal = st.number_input("Goal", value=d.goal, step=100.0)

    st.header("Simulation")
    num_simulations = st.number_input("Simulations", min_value=1, max_value=1_000_000,
                                      value=10_000, step=1000)
    seed_text = st.text_input("Seed (blank = random)", value="42")

try:
    seed = int(seed_text) if seed_text.strip() else None
except ValueError:
    st.error(f"Seed must be an integer, got {seed_text!r}.")
    st.stop()

config = PortfolioConfig(
    initial_investment=float(initial_investment),
    expected_yearly_return=expected_pct / 100.0,
    monthly_contributions=float(monthly_contributions),
    volatility=volatility_pct / 100.0,
    years=int(years),
    goal=float(goal),
    num_simulations=int(num_simulations),
    seed=seed,
)

# ═══════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════
validation = validate_config(config)
for w in validation.warnings:
    st.warning(w)
if not validation.is_valid:
    st.error(validation.summary())
    st.stop()

# ═══════════════════════════════════════════════════════════════════════════
# RUN
# ═══════════════════════════════════════════════════════════════════════════
with st.spinner(f"Running {config.num_simulations:,} simulations..."):
    try:
        sample = _simulate(config)
        result = summarize_sample(sample, goal=config.goal, confidence_level=CONFIDENCE_LEVEL)
    except ProjectionError as exc:
        st.error(str(exc))
        st.stop()

# --- 1. KPI row ---
lower, upper = result.confidence_interval
k1, k2, k3, k4 = st.columns(4)
k1.metric("Median Value", _fmt_money(result.median_value))
k2.metric("P(Reach Goal)", f"{result.goal_probability:.2%}")
k3.metric(f"{result.confidence_level:.0%} Lower", _fmt_money(lower))
k4.metric(f"{result.confidence_level:.0%} Upper", _fmt_money(upper))

# --- 2. Distribution ---
left, right = st.columns([2, 1])
with left:
    _plot_histogram(sample, result)
with right:
    st.markdown("**Summary**")
    st.dataframe(report_table(result), use_container_width=True, hide_index=True)
    st.markdown("**Percentile Table**")
    st.dataframe(percentile_table(sample).round(2), use_container_width=True, hide_index=True)
    st.markdown("**Return Model**")
    st.dataframe(build_sampler(config).describe(), use_container_width=True, hide_index=True)

# --- 3. Paths ---
n_fan = min(MAX_FAN_PATHS, config.num_simulations)
_plot_fan(_simulate_paths(config, n_fan), config)

st.caption(
    f"Deterministic value at the expected return: {_fmt_money(deterministic_value(config))}"
)
