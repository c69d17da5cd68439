"""
Interactive Plotly chart functions for the Phase Estimation Dashboard.
All figures use plotly_dark template with matching background colors.
"""
import numpy as np
import plotly.graph_objects as go

from algorithms.parameters import circuit_depth, classical_sample_count
from algorithms.sensing import heatmap_colorscale

_PAPER_BG = "#0E1117"
_PLOT_BG  = "#111827"
_FONT_CLR = "#E0E0E0"

_DARK_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor=_PAPER_BG,
    plot_bgcolor=_PLOT_BG,
    font=dict(color=_FONT_CLR),
)

_ONE_CLR  = "#6c5ce7"
_ZERO_CLR = "#636e72"


# ---------------------------------------------------------------------------
# Direct sampling – bit grid
# ---------------------------------------------------------------------------

def plotly_sampling_grid(bits: list, columns: int = 10, limit: int = 50) -> go.Figure:
    """
    Grid of sampled bits, |1⟩ outcomes highlighted.
    At most ``limit`` bits are drawn; the title notes how many were left out.
    """
    shown = bits[:limit]
    rows = max(1, -(-len(shown) // columns))
    z = np.full((rows, columns), np.nan)
    text = [["" for _ in range(columns)] for _ in range(rows)]
    for i, bit in enumerate(shown):
        r, c = divmod(i, columns)
        z[r, c] = 1.0 if bit == "1" else 0.0
        text[r][c] = bit

    fig = go.Figure(go.Heatmap(
        z=z,
        text=text,
        texttemplate="%{text}",
        colorscale=[[0.0, _ZERO_CLR], [1.0, _ONE_CLR]],
        zmin=0,
        zmax=1,
        showscale=False,
        xgap=3,
        ygap=3,
        hovertemplate="Sample %{customdata}: %{text}<extra></extra>",
        customdata=[[r * columns + c + 1 for c in range(columns)] for r in range(rows)],
    ))

    title = f"Sample Results ({len(shown)} shown)"
    if len(bits) > limit:
        title += f" — and {len(bits) - limit} more samples"

    fig.update_layout(
        **_DARK_LAYOUT,
        title=dict(text=title, font=dict(size=14)),
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, autorange="reversed"),
        height=90 + 40 * rows,
        margin=dict(l=10, r=10, t=50, b=10),
    )
    return fig


# ---------------------------------------------------------------------------
# Phase estimation – measurement histogram
# ---------------------------------------------------------------------------

def plotly_phase_histogram(histogram: list) -> go.Figure:
    """
    Bar chart of phase measurement outcomes.
    Hover shows bitstring, estimated phase φ, count and share.

    Args:
        histogram: rows from ``algorithms.analysis.phase_histogram``
    """
    bitstrings = [row["bits"] for row in histogram]
    counts     = [row["count"] for row in histogram]

    fig = go.Figure(go.Bar(
        x=[f"|{bs}⟩" for bs in bitstrings],
        y=counts,
        marker_color=_ONE_CLR,
        customdata=[(row["phase"], row["percentage"]) for row in histogram],
        hovertemplate=(
            "<b>%{x}</b><br>"
            "Phase φ = %{customdata[0]:.3f}<br>"
            "Count: %{y}<br>"
            "Share: %{customdata[1]:.1f}%"
            "<extra></extra>"
        ),
    ))

    fig.update_layout(
        **_DARK_LAYOUT,
        title=dict(text="Phase Measurement Histogram", font=dict(size=15)),
        xaxis=dict(title="Ancilla Register State", tickangle=-45),
        yaxis=dict(title="Counts", dtick=1),
        showlegend=False,
        height=380,
    )
    return fig


# ---------------------------------------------------------------------------
# Resource scaling – Nsample vs depth
# ---------------------------------------------------------------------------

def plotly_scaling_comparison(epsilon: float) -> go.Figure:
    """
    Interactive line chart: classical samples ⌈1/ε²⌉ vs quantum depth ⌈1/ε⌉.
    Legend items are clickable to toggle lines.
    """
    eps = np.round(np.arange(0.01, 0.51, 0.01), 2)
    classical = [classical_sample_count(e) for e in eps]
    quantum   = [circuit_depth(e) for e in eps]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=eps, y=classical,
        mode="lines",
        name="Direct sampling  O(1/ε²)",
        line=dict(color="#e17055", width=2.5),
        hovertemplate="ε=%{x}<br>Samples: %{y:,}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=eps, y=quantum,
        mode="lines",
        name="Phase estimation  O(1/ε)",
        line=dict(color=_ONE_CLR, width=2.5),
        hovertemplate="ε=%{x}<br>Depth: %{y}<extra></extra>",
    ))

    samples_here = classical_sample_count(epsilon)
    depth_here = circuit_depth(epsilon)
    fig.add_annotation(
        x=epsilon, y=np.log10(samples_here),
        text=f"ε={epsilon}<br>{samples_here / depth_here:.0f}× fewer",
        showarrow=True,
        arrowhead=2,
        arrowcolor="#a29bfe",
        font=dict(color="#a29bfe", size=12),
        bgcolor=_PAPER_BG,
        bordercolor="#a29bfe",
    )

    fig.update_layout(
        **_DARK_LAYOUT,
        title="Resources vs Accuracy",
        xaxis=dict(title="Accuracy parameter ε", autorange="reversed"),
        yaxis=dict(title="Samples / circuit depth", type="log"),
        legend=dict(bgcolor=_PAPER_BG, bordercolor="#444", borderwidth=1),
        height=420,
    )
    return fig


# ---------------------------------------------------------------------------
# Quantum sensing – target grid and phase heatmap
# ---------------------------------------------------------------------------

def plotly_target_grid(target, grid_size: int) -> go.Figure:
    """Empty sensor grid with the placed anomaly marked."""
    fig = go.Figure(go.Heatmap(
        z=np.zeros((grid_size, grid_size)),
        colorscale=[[0, _PLOT_BG], [1, _PLOT_BG]],
        showscale=False,
        xgap=1,
        ygap=1,
        hovertemplate="x=%{x}, y=%{y}<extra></extra>",
    ))
    if target is not None:
        fig.add_trace(go.Scatter(
            x=[target[0]], y=[target[1]],
            mode="markers",
            marker=dict(symbol="square", size=14, color=_ONE_CLR),
            name="Target",
            hovertemplate="Target at (%{x}, %{y})<extra></extra>",
        ))

    fig.update_layout(
        **_DARK_LAYOUT,
        title="Target Placement",
        xaxis=dict(title="x", range=[-0.5, grid_size - 0.5]),
        yaxis=dict(title="y", range=[grid_size - 0.5, -0.5], scaleanchor="x"),
        showlegend=False,
        height=460,
    )
    return fig


def plotly_sensing_heatmap(phase_map: np.ndarray) -> go.Figure:
    """
    Heatmap of the phase shift each sensor reads.
    Hover shows the cell and φ in radians.
    """
    fig = go.Figure(go.Heatmap(
        z=phase_map,
        zmin=0,
        zmax=np.pi,
        colorscale=heatmap_colorscale(),
        hovertemplate="x=%{x}, y=%{y}<br>φ = %{z:.3f} rad<extra></extra>",
        colorbar=dict(
            title=dict(text="φ (rad)", font=dict(color=_FONT_CLR)),
            tickfont=dict(color=_FONT_CLR),
        ),
    ))

    fig.update_layout(
        **_DARK_LAYOUT,
        title="Phase Estimation Heatmap",
        xaxis=dict(title="x"),
        yaxis=dict(title="y", autorange="reversed", scaleanchor="x"),
        height=460,
    )
    return fig
