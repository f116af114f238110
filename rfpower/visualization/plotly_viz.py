"""
Interactive Plotly figure of the dBm ⇄ Watt transfer curve.

Returns a go.Figure suitable for st.plotly_chart() in the browser view.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from ..config import ConverterConfig, DEFAULT_CONFIG
from ..utils.constants import DB_PER_DECADE, DBM_OFFSET_DB, REFERENCE_POWER_W


def power_curve(config: ConverterConfig = DEFAULT_CONFIG) -> tuple[np.ndarray, np.ndarray]:
    """Sample the curve: dBm levels and their Watt values."""
    dbm = np.linspace(config.curve_min_dbm, config.curve_max_dbm, config.curve_points)
    watts = np.power(10.0, (dbm - DBM_OFFSET_DB) / DB_PER_DECADE)
    return dbm, watts


def plot_power_curve(operating_dbm: Optional[float] = None,
                     operating_watts: Optional[float] = None,
                     config: ConverterConfig = DEFAULT_CONFIG,
                     title: str = "dBm ⇄ Watt") -> go.Figure:
    """Transfer curve on a log Watt axis, with the current point marked if given."""
    dbm, watts = power_curve(config)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=dbm, y=watts,
        mode='lines',
        line=dict(color='#2563EB', width=2),
        name='P(W) = 10^((dBm - 30) / 10)',
        hovertemplate='%{x:.2f} dBm<br>%{y:.6g} W<extra></extra>',
    ))

    # 1 mW reference
    fig.add_hline(y=REFERENCE_POWER_W, line_dash="dash", line_color="gray",
                  annotation_text="0 dBm = 1 mW")

    if operating_dbm is not None and operating_watts is not None and operating_watts > 0:
        fig.add_trace(go.Scatter(
            x=[operating_dbm], y=[operating_watts],
            mode='markers',
            marker=dict(color='#16A34A', size=12, symbol='circle'),
            name='Current value',
            hovertemplate='%{x:.6f} dBm<br>%{y:.6f} W<extra></extra>',
        ))

    fig.update_layout(
        title=title,
        xaxis_title="Power level (dBm)",
        yaxis_title="Power (W)",
        yaxis_type="log",
        template="plotly_white",
        height=400,
        margin=dict(l=60, r=20, t=50, b=50),
        legend=dict(x=0.01, y=0.99),
    )
    return fig
