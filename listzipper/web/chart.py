from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

import plotly.graph_objs as go

from ..core.transforms import TRANSFORMS


COLORS = {
    'bg_dark': '#0a0a0f',
    'bg_medium': '#1a1a2e',
    'bg_light': '#16213e',
    'neon_pink': '#ff006e',
    'neon_cyan': '#00d4ff',
    'neon_purple': '#9d4edd',
    'neon_green': '#00ff88',
    'neon_yellow': '#ffbe0b',
    'text_primary': '#ffffff',
}

SERIES_COLORS: List[str] = [
    COLORS['neon_pink'], COLORS['neon_green'], COLORS['neon_yellow'], COLORS['neon_purple'],
]


def _axis(title: str) -> Dict:
    return dict(
        gridcolor=COLORS['bg_light'],
        title=dict(text=title, font=dict(color=COLORS['text_primary'])),
        tickfont=dict(color=COLORS['text_primary']),
    )


def build_figure(
    samples: Sequence[float],
    derived: Mapping[str, Sequence[float]],
    title: str = "Samples",
) -> go.Figure:
    """Plot the original samples with each derived series overlaid.

    Peak markers are drawn as bars so zero entries stay invisible; every other
    series is a line over the sample positions.
    """
    xs = list(range(len(samples)))
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=xs,
        y=list(samples),
        mode="lines+markers",
        name="Samples",
        line=dict(color=COLORS['neon_cyan'], width=2),
    ))
    for i, (key, values) in enumerate(derived.items()):
        spec = TRANSFORMS.get(key)
        label = spec.label if spec else key
        color = SERIES_COLORS[i % len(SERIES_COLORS)]
        if key == "peaks":
            fig.add_trace(go.Bar(x=xs, y=list(values), name=label, marker=dict(color=color), opacity=0.5))
        else:
            fig.add_trace(go.Scatter(
                x=xs,
                y=list(values),
                mode="lines",
                name=label,
                line=dict(color=color, width=2),
            ))

    fig.update_layout(
        title=dict(text=title, font=dict(color=COLORS['text_primary'])),
        plot_bgcolor=COLORS['bg_medium'],
        paper_bgcolor=COLORS['bg_medium'],
        font=dict(color=COLORS['text_primary']),
        xaxis=_axis("Position"),
        yaxis=_axis("Value"),
        legend=dict(font=dict(color=COLORS['text_primary'])),
        margin=dict(l=50, r=50, t=50, b=50),
    )
    return fig
